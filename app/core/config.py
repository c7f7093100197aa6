from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://pagebuilder:pagebuilder@db:5432/pagebuilder")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    # liste séparée par des virgules, "*" pour tout autoriser
    CORS_ORIGINS = [o.strip() for o in getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

settings = Settings()
