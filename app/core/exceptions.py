from typing import Optional


class RelayError(Exception):
    """Base error rendered as a ``{"reply": ...}`` body."""

    status_code: int = 500

    def __init__(self, reply: str, status_code: Optional[int] = None):
        super().__init__(reply)
        self.reply = reply
        if status_code is not None:
            self.status_code = status_code


class QuestionValidationError(RelayError):
    status_code = 400

    def __init__(self, reply: str = "Campo question/input/message é obrigatório."):
        super().__init__(reply)


class ConfigurationMissing(RelayError):
    status_code = 503

    def __init__(self, reply: str = "Container não configurado: DATABRICKS_URL/DATABRICKS_TOKEN."):
        super().__init__(reply)


class DownstreamError(RelayError):
    """Network failure or non-2xx answer from the serving endpoint."""

    status_code = 502

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(f"[Erro] {message}", status_code or self.status_code)
        self.message = message
