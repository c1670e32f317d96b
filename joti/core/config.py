from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./joti.db")
    RETENTION_DAYS = int(getenv("RETENTION_DAYS", "60"))  # pages non lues depuis 60 jours -> supprimées
    SWEEP_INTERVAL_SECONDS = int(getenv("SWEEP_INTERVAL_SECONDS", "86400"))  # une fois par jour
    EDITCODE_ROUNDS = int(getenv("EDITCODE_ROUNDS", "12"))  # coût bcrypt
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

settings = Settings()
