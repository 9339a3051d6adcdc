from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # JWT: shared with the upstream identity service that issues tokens
    JWT_SECRET: str = "change-me-in-dotenv"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 30

    # Only this principal may call the /admin surface
    OWNER_PRINCIPAL: str = "owner"

    # Asset unit sizes and oracle fixed-point scale
    ASSET_A_DECIMALS: int = 18
    ASSET_B_DECIMALS: int = 6
    PRICE_DECIMALS: int = 8

    # Liquidator pays this percent of the collateral value
    LIQUIDATION_DISCOUNT_RATE: int = 95

    # 0 disables the staleness check; the manual feed is refreshed via POST /admin/oracle/rate
    ORACLE_MAX_AGE_SECONDS: int = 3600
    # Seed for the manual price feed: asset-B per asset-A, scaled by PRICE_DECIMALS
    INITIAL_PRICE_RATE: int = 2_000 * 10**8

    # App
    APP_NAME: str = "Pool Lending Ledger"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
