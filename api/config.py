from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm import declarative_base
from dotenv import load_dotenv
load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./focus.db"

    # Remote text-generation collaborator: "http" (chat endpoint) or "ollama" (local model)
    text_service_backend: str = "http"
    text_service_url: str = "http://localhost:8080"
    text_service_token: str | None = None
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "qwen:latest"
    smart_plan_timeout_seconds: float = 15.0

    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30


settings = Settings()

_connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
engine = create_engine(settings.database_url, connect_args=_connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def reset_db():
    Base.metadata.drop_all(bind=engine)
    create_db()

def create_db():
    # Tables are registered on Base when the models module is imported.
    import api.models.models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
