import time
import requests
from .config import settings
from .logging import get_logger

log = get_logger(__name__)

def get_text(url, timeout=None, retries=None):
    timeout = settings.HTTP_TIMEOUT if timeout is None else timeout
    retries = settings.HTTP_RETRIES if retries is None else retries
    for attempt in range(retries+1):
        try:
            resp = requests.get(url, timeout=timeout)
            resp.raise_for_status()
            return resp.text
        except requests.RequestException as e:
            log.warning(f"http.get failed attempt={attempt} url={url} err={e}")
            if attempt == retries:
                raise
            time.sleep(0.5 * (attempt+1))
