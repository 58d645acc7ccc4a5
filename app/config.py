from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    lookup_url: str = "http://www.whitepages.com/search/ReversePhone?full_phone="
    user_agent: str = (
        "Mozilla/5.0 (X11; Linux x86_64; rv:26.0) Gecko/20100101 Firefox/26.0"
    )
    cookie_name: str = "D_UID"
    max_redirects: int = 5
    request_timeout: float = 30.0
    log_level: str = "INFO"
    log_pii: bool = False
