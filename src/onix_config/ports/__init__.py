from .config_writer import ConfigWriter
from .log_sink import LogSink

# Public port exports keep wiring explicit at composition time.
__all__ = ["ConfigWriter", "LogSink"]
