"""
Celery application — background EBM synchronisation.
Broker is Redis in production; settings_dev runs tasks eagerly.
"""

import os
from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vsdc_gateway.settings")

app = Celery("vsdc_gateway")
app.config_from_object("django.conf:settings", namespace="CELERY")

app.autodiscover_tasks()
