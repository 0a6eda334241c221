"""User-facing message catalog for the transport boundary."""

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "generic_failure": "Operation failed, please try again.",
        "duplicate": "This {field} is already registered.",
        "validation": "Required information is missing or invalid.",
        "not_found": "Record not found.",
        "unknown_channel": "Unknown operation.",
    },
    "pt_BR": {
        "generic_failure": "Falha ao executar a operação. Tente novamente.",
        "duplicate": "Este {field} já está cadastrado.",
        "validation": "Informações obrigatórias ausentes ou inválidas.",
        "not_found": "Registro não encontrado.",
        "unknown_channel": "Operação desconhecida.",
    },
}

FIELD_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "tax_id": "tax ID",
        "serial_number": "serial number",
        "order_number": "order number",
        "_default": "identifier",
    },
    "pt_BR": {
        "tax_id": "CPF/CNPJ",
        "serial_number": "número de série",
        "order_number": "número de OS",
        "_default": "identificador",
    },
}


class MessageCatalog:
    """Looks up localized messages, falling back to English."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale if locale in MESSAGES else DEFAULT_LOCALE
        self._messages = MESSAGES[self.locale]
        self._labels = FIELD_LABELS[self.locale]

    def get(self, key: str) -> str:
        return self._messages[key]

    def duplicate(self, field: str) -> str:
        label = self._labels.get(field, self._labels["_default"])
        return self._messages["duplicate"].format(field=label)
