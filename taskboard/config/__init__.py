from .settings import Settings, configure_logging
