from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # MongoDB URL including the database name, e.g. mongodb://localhost/sessionauth
    host: str = "0.0.0.0"
    port: int = 3001
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    cookie_secure: bool = False  # Mark cookies Secure; enable behind HTTPS
    forwarded_allow_ips: str = "127.0.0.1"  # Proxies trusted for X-Forwarded-* (scheme decides Secure cookies)

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SESSIONAUTH_",
        "extra": "ignore",
    }
