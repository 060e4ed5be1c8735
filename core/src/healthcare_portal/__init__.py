from healthcare_portal.config import CoreConfig, load_core_config
from healthcare_portal.handler import StaticPageHandler
from healthcare_portal.home import HealthcarePaths, ensure_healthcare_layout, resolve_healthcare_home
from healthcare_portal.page import CONTENT_TYPE, DASHBOARD_HTML

__version__ = "1.0.0"

__all__ = [
    "CONTENT_TYPE",
    "DASHBOARD_HTML",
    "CoreConfig",
    "HealthcarePaths",
    "StaticPageHandler",
    "__version__",
    "ensure_healthcare_layout",
    "load_core_config",
    "resolve_healthcare_home",
]
