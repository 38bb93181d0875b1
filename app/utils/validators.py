from typing import Iterable, List, Optional

# Valeurs sentinelles laissées par des clients mal sérialisés
INVALID_TOKEN_VALUES = {"null", "undefined"}


def is_valid_push_token(token: Optional[str]) -> bool:
    if not token or not isinstance(token, str):
        return False

    stripped = token.strip()
    return bool(stripped) and stripped not in INVALID_TOKEN_VALUES


def clean_tokens(tokens: Iterable[Optional[str]]) -> List[str]:
    return [token for token in tokens if is_valid_push_token(token)]
