from .models import APP_SELECTOR_NAME

def get_app_labels(name: str) -> dict[str, str]:
    return { APP_SELECTOR_NAME: name }
