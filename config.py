from pydantic_settings import BaseSettings

from utils.case import CasingConvention


class Settings(BaseSettings):
    app_name: str = "Letter Case API"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3005

    # Clients send camelCase; handlers work in kebab-case; clients receive camelCase.
    request_from_case: CasingConvention = CasingConvention.CAMEL
    request_to_case: CasingConvention = CasingConvention.KEBAB
    response_to_case: CasingConvention = CasingConvention.CAMEL

    docs_path: str = "/openapi.json"
    docs_to_case: CasingConvention = CasingConvention.CAMEL

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
