from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from dotenv import load_dotenv



# Get the path to the .env file
CONFIG_DIR = Path(__file__).resolve().parent
# Assuming .env is in the project root (two levels up from interview_generator/core)
PROJECT_ROOT = CONFIG_DIR.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / '.env'

# Load environment variables from .env file
load_dotenv(ENV_FILE_PATH)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding='utf-8',
        extra='ignore',
        frozen=True,
    )


    DEBUG_MODE: bool = False

    # Shared secret expected in the x-vapi-secret header (check disabled when empty)
    VAPI_SECRET: str = ""

    GEMINI_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-2.0-flash-001"

    # Firebase service account
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_CLIENT_EMAIL: str = ""
    FIREBASE_PRIVATE_KEY: str = ""

    INTERVIEWS_COLLECTION: str = "interviews"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_TO_FILE: bool = True

    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("FIREBASE_PRIVATE_KEY")
    @classmethod
    def normalize_private_key(cls, value: str) -> str:
        """Keys pasted into .env files carry literal '\\n' sequences."""
        return value.replace("\\n", "\n")

    @property
    def firebase_configured(self) -> bool:
        return bool(self.FIREBASE_PROJECT_ID and self.FIREBASE_CLIENT_EMAIL and self.FIREBASE_PRIVATE_KEY)


# Loaded once at process start; handlers receive it through api.deps.get_settings
settings = Settings()
