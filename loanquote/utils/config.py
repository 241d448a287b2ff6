import os
from dataclasses import dataclass

@dataclass
class Settings:
    MIN_AMOUNT: int = int(os.getenv("MIN_AMOUNT", "1000"))
    MAX_AMOUNT: int = int(os.getenv("MAX_AMOUNT", "15000"))
    AMOUNT_MULTIPLE: int = int(os.getenv("AMOUNT_MULTIPLE", "100"))
    DEFAULT_TERM_MONTHS: int = int(os.getenv("DEFAULT_TERM_MONTHS", "36"))
    LENDERS_SOURCE: str = os.getenv("LENDERS_SOURCE", "")
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))
    HTTP_RETRIES: int = int(os.getenv("HTTP_RETRIES", "2"))
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "5002"))

settings = Settings()
