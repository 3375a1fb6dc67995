"""Item master async tasks."""

import logging
from celery import shared_task

logger = logging.getLogger("vsdc_gateway.items.tasks")


class EBMSyncFailed(Exception):
    pass


@shared_task(bind=True, max_retries=3, default_retry_delay=10)
def sync_item_to_ebm(self, item_cd: str):
    """Push an item to EBM in the background; retried while EBM rejects or is unreachable."""
    from apps.catalog.service import ItemService

    result = ItemService().sync_item(item_cd)
    if result is None:
        logger.error("Item %s not found for EBM sync", item_cd)
        return None

    if not result["success"]:
        logger.error("EBM sync error for %s: %s", item_cd, result["error"])
        raise self.retry(exc=EBMSyncFailed(f"EBM sync failed for {item_cd}: {result['status']}"))

    logger.info("EBM sync task done for %s", item_cd)
    return result["status"]
