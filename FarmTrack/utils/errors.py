from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError


class InputValidationError(ValueError):
    """
    Datos de entrada malformados (peso o tamaño de muestra negativo,
    fechas de muestreo fuera de orden). Se lanza de inmediato y nunca
    se convierte en un valor por defecto.
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(e["msg"] for e in self.errors))


def _normalize_errors(errs):
    norm = []
    for e in errs:
        e = dict(e)
        val = e.get("input")
        if isinstance(val, (bytes, bytearray)):
            e["input"] = val.decode("utf-8", errors="ignore")
        elif val is not None and not isinstance(val, (str, int, float, bool, list, dict)):
            e["input"] = str(val)
        e.pop("ctx", None)
        e.pop("url", None)
        norm.append(e)
    return norm


def install_error_handlers(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "validation_error", "detail": _normalize_errors(exc.errors())},
        )

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(request: Request, exc: InputValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "validation_error", "detail": _normalize_errors(exc.errors)},
        )
