from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
import os
from dotenv import load_dotenv

from services.catalog import get_examples_dir, list_examples
from services.logging_utils import get_logger
from services.lexicon import parse_lexicon
from services.scorer import RISK_HIGH, RISK_LOW, RISK_MEDIUM, score_email

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(__file__))

MISSING_FILES_ERROR = "Faltan archivos palabras o correo"
NOT_TEXT_ERROR = "Los archivos deben ser texto UTF-8"
MALFORMED_FORM_ERROR = "El formulario enviado no es válido"
INTERNAL_ERROR = "Error interno analizando"

# Labels shown on the page and returned in "riesgo"
RISK_LABELS = {
    RISK_HIGH: "ALTO",
    RISK_MEDIUM: "MEDIO",
    RISK_LOW: "BAJO",
}

app = FastAPI(title="BankReview")
templates = Jinja2Templates(directory=os.path.join(BASE_DIR, "templates"))
logger = get_logger(__name__)

app.mount("/examples", StaticFiles(directory=get_examples_dir()), name="examples")


class UploadDecodeError(ValueError):
    """An uploaded file could not be read as UTF-8 text."""


async def read_upload_text(upload: UploadFile) -> str:
    data = await upload.read()
    try:
        # utf-8-sig drops a leading BOM left by spreadsheet exports
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise UploadDecodeError(upload.filename or "upload") from exc


def to_response_payload(outcome: dict) -> dict:
    """Map an analysis outcome onto the JSON shape the page consumes."""
    return {
        "resultados": [
            {
                "palabra": row["term"],
                "freq": row["frequency"],
                "valor": row["weight"],
                "total": row["total"],
            }
            for row in outcome["rows"]
        ],
        "puntajeTotal": outcome["grand_total"],
        "riesgo": RISK_LABELS[outcome["risk_tier"]],
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"ejemplos": list_examples()},
    )


@app.get("/catalog")
async def catalog():
    """
    JSON API: the example wordlist/email pairs available under /examples.
    """
    return list_examples()


@app.post("/analisis")
async def analisis(request: Request):
    """
    Receives multipart/form-data with the files "palabras" (wordlist) and
    "correo" (email body) and returns the scored table as JSON.
    """
    try:
        async with request.form() as form:
            palabras = form.get("palabras")
            correo = form.get("correo")

            if not isinstance(palabras, UploadFile) or not isinstance(correo, UploadFile):
                logger.warning(
                    "missing upload",
                    extra={"fields": sorted(form.keys())},
                )
                return JSONResponse({"error": MISSING_FILES_ERROR}, status_code=400)

            try:
                lexicon_text = await read_upload_text(palabras)
                email_text = await read_upload_text(correo)
            except UploadDecodeError as exc:
                logger.warning("upload is not utf-8 text", extra={"upload": str(exc)})
                return JSONResponse({"error": NOT_TEXT_ERROR}, status_code=400)

        lexicon = parse_lexicon(lexicon_text)
        outcome = score_email(lexicon, email_text)
        logger.info(
            "analysis completed",
            extra={
                "terms": len(lexicon),
                "rows": len(outcome["rows"]),
                "grand_total": outcome["grand_total"],
                "risk_tier": outcome["risk_tier"],
            },
        )
        return to_response_payload(outcome)

    except HTTPException as exc:
        # raised by form parsing, e.g. multipart without a boundary
        logger.warning("malformed form", extra={"detail": exc.detail})
        return JSONResponse({"error": MALFORMED_FORM_ERROR}, status_code=exc.status_code)

    except Exception:
        logger.exception("analysis failed")
        return JSONResponse({"error": INTERNAL_ERROR}, status_code=500)
