from pydantic_settings import BaseSettings
from typing import List, Literal, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Molecular Database Integration"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Simulated biological database catalog and fan-out search API"
    API_PREFIX: str = ""
    
    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # CORS settings
    ALLOWED_HOSTS: List[str] = ["*"]
    
    # Mock generation settings
    MOCK_RANDOM_SEED: Optional[int] = None  # None keeps generation unseeded
    SEARCH_RESULT_BASE_URL: str = "https://example.com/search"
    
    # Source query settings
    SIMULATE_LATENCY: bool = True
    LATENCY_SCALE: float = 1.0
    QUERY_EXECUTION_MODE: Literal["concurrent", "sequential"] = "concurrent"
    DEFAULT_E_VALUE: float = 0.01
    DEFAULT_IDENTITY_THRESHOLD: float = 0.7
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
