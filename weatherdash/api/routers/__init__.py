from weatherdash.api.routers import health, log_search, weather

__all__ = ["health", "log_search", "weather"]
