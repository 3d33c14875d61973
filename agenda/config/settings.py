import json
from decimal import Decimal
from typing import Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurazione dell'applicazione tramite Pydantic BaseSettings.
    Carica automaticamente le variabili d'ambiente e il file .env.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Studio Agenda"
    PROJECT_DESCRIPTION: str = "Agenda appuntamenti per studio di fisioterapia e osteopatia"
    VERSION: str = "0.1.0"

    # Application Settings
    ENVIRONMENT: str = Field("development", description="Ambiente di esecuzione")
    DEBUG: bool = Field(False, description="Modalità debug")
    LOG_LEVEL: str = Field("INFO", description="Livello di logging")
    LOG_FORMAT: str = Field("colored", description="Formato dei log: colored, json o plain")

    # Database Settings
    DATABASE_URL: str = Field(
        "sqlite+aiosqlite:///./agenda.db",
        description="URL SQLAlchemy asincrona del record store",
    )
    DB_ECHO: bool = Field(False, description="Log SQL queries (solo per debug)")

    # Operating window
    DAY_START_HOUR: int = Field(7, description="Prima ora prenotabile della giornata")
    DAY_END_HOUR: int = Field(22, description="Ora di chiusura della giornata")
    SLOT_MINUTES: int = Field(30, description="Durata di uno slot di disponibilità in minuti")
    RECURRENCE_MAX_OCCURRENCES: int = Field(200, description="Massimo numero di appuntamenti per inserimento")

    # Standard prices
    PRICE_SEDUTA_INVOICED: Decimal = Field(Decimal("40"), description="Prezzo seduta fatturata")
    PRICE_SEDUTA_CASH: Decimal = Field(Decimal("35"), description="Prezzo seduta in contanti")
    PRICE_MACCHINARIO_INVOICED: Decimal = Field(Decimal("25"), description="Prezzo macchinario fatturato")
    PRICE_MACCHINARIO_CASH: Decimal = Field(Decimal("20"), description="Prezzo macchinario in contanti")
    AUTO_APPLY_PRICES: bool = Field(True, description="Applica automaticamente il prezzo standard")

    # Practice
    DEFAULT_CLINIC_SITE: str = Field("Studio Pontecorvo", description="Sede predefinita")
    CLINIC_ADDRESSES: dict[str, str] = Field(
        default={"Studio Pontecorvo": "Pontecorvo, Via Galileo Galilei 5, dietro il Bar Principe"},
        description="Indirizzo completo di ogni sede, usato nei messaggi",
    )
    PRACTITIONER_SIGNATURE: str = Field(
        "Dr. Marco Turchetta\nFisioterapia e Osteopatia",
        description="Firma in calce ai messaggi",
    )

    # WhatsApp Web deep links
    WHATSAPP_WEB_URL: str = Field("https://web.whatsapp.com/send", description="URL base di WhatsApp Web")
    PHONE_COUNTRY_PREFIX: str = Field("39", description="Prefisso internazionale per numeri nazionali")

    # Clock tick for the current-time line
    CLOCK_TICK_ENABLED: bool = Field(True, description="Abilita il tick dell'orologio")
    CLOCK_TICK_SECONDS: int = Field(60, description="Intervallo del tick in secondi")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("CLINIC_ADDRESSES", mode="before")
    @classmethod
    def parse_clinic_addresses(cls, value: Any) -> Any:
        if isinstance(value, str):
            return json.loads(value)
        return value

    @field_validator("DAY_END_HOUR")
    @classmethod
    def validate_day_end(cls, v: int, info) -> int:
        start = info.data.get("DAY_START_HOUR", 0)
        if not start < v <= 23:
            raise ValueError("DAY_END_HOUR must be after DAY_START_HOUR and at most 23")
        return v

    @field_validator("SLOT_MINUTES")
    @classmethod
    def validate_slot_minutes(cls, v: int) -> int:
        if v <= 0 or 60 % v != 0:
            raise ValueError("SLOT_MINUTES must divide an hour evenly")
        return v

    @computed_field
    @property
    def is_development(self) -> bool:
        """Determina se l'applicazione è in modalità sviluppo"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Singleton per la configurazione
_settings_instance = None


def get_settings() -> Settings:
    """
    Restituisce un'istanza cacheata della configurazione.
    Evita di rileggere le variabili d'ambiente più volte.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
