"""Mock Merchant Configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class MerchantSettings(BaseSettings):
    """Backend settings loaded from environment (MERCHANT_ prefix)"""

    app_name: str = "Mock Merchant"
    host: str = "0.0.0.0"
    port: int = 8001
    debug: bool = False

    # Development identity tokens
    jwt_secret: str = "dev-only-secret-change-me-before-deploying"
    jwt_algorithm: str = "HS256"
    token_ttl_minutes: int = 60

    # Comma-separated user ids that hold the admin role from startup
    admin_users: str = ""

    # Load the demo catalog on startup
    seed_catalog: bool = True

    class Config:
        env_prefix = "MERCHANT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def admin_user_ids(self) -> list[str]:
        return [uid.strip() for uid in self.admin_users.split(",") if uid.strip()]


@lru_cache()
def get_merchant_settings() -> MerchantSettings:
    """Get cached settings instance"""
    return MerchantSettings()
