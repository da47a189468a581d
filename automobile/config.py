from pydantic_settings import BaseSettings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/automobile.sqlite3"
    api_key: str = ""  # empty = no auth check (local dev)
    data_dir: str = "./data"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    echo_sql: bool = False
    cors_origins: list[str] = ["http://localhost:8000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
