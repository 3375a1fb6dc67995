"""
VSDC environment configuration, frozen once from Django settings.
Handlers receive a VSDCConfig instead of reading settings themselves.
"""

from dataclasses import dataclass, field
from types import MappingProxyType

from django.conf import settings


@dataclass(frozen=True)
class VSDCEnvironment:
    ebm_api_url:       str
    vsdc_request_form: str


@dataclass(frozen=True)
class VSDCConfig:
    environments:   MappingProxyType
    current_env:    str = "test"
    default_bhf_id: str = "00"
    timeout:        int = 30
    sdc_id:         str = "SDC010000005"
    mrc_no:         str = "WIS01006230"
    auto_sync:      bool = False
    service_name:   str = "VSDC Backend API"
    vsdc_version:   str = "1.0.4"
    documentation:  str = field(default="VSDC Specification v1.0.4 (8th April, 2022)")

    @property
    def current(self) -> VSDCEnvironment:
        return self.environments[self.current_env]

    @property
    def ebm_api_url(self) -> str:
        return self.current.ebm_api_url

    @classmethod
    def from_settings(cls) -> "VSDCConfig":
        environments = MappingProxyType({
            "test": VSDCEnvironment(
                ebm_api_url       = settings.RRA_TEST_URL,
                vsdc_request_form = settings.RRA_TEST_REQUEST_FORM,
            ),
            "production": VSDCEnvironment(
                ebm_api_url       = settings.RRA_PRODUCTION_URL,
                vsdc_request_form = settings.RRA_PRODUCTION_REQUEST_FORM,
            ),
        })
        current_env = settings.RRA_ENVIRONMENT
        if current_env not in environments:
            raise ValueError(f"Unknown RRA_ENVIRONMENT {current_env!r}")
        return cls(
            environments   = environments,
            current_env    = current_env,
            default_bhf_id = settings.DEFAULT_BHF_ID,
            timeout        = getattr(settings, "VSDC_TIMEOUT", 30),
            sdc_id         = getattr(settings, "VSDC_SDC_ID", "SDC010000005"),
            mrc_no         = getattr(settings, "VSDC_MRC_NO", "WIS01006230"),
            auto_sync      = getattr(settings, "VSDC_AUTO_SYNC", False),
        )


_config = None


def get_vsdc_config() -> VSDCConfig:
    global _config
    if _config is None:
        _config = VSDCConfig.from_settings()
    return _config
