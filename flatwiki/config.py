from pathlib import Path

from pydantic_settings import BaseSettings

TEMPLATES_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    data_dir: Path = Path("data")
    templates_dir: Path = TEMPLATES_DIR
    host: str = "0.0.0.0"
    port: int = 8080
    front_page: str = "FrontPage"
    reload: bool = False
    log_level: str = "INFO"

    model_config = {"env_prefix": "FLATWIKI_"}


settings = Settings()
