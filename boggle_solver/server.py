import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from boggle_solver.errors import BoggleError
from boggle_solver.metrics import StageTimer
from boggle_solver.settings import settings
from boggle_solver.solver import Boggle, load_words, rank_words

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Shared engine, populated at startup
_boggle = Boggle()

# Changing any of these reloads the dictionary
_DICTIONARY_FIELDS = ("DICTIONARY_PATH", "MIN_WORD_LENGTH")


def _load_dictionary():
    global _boggle
    dict_path = settings.DICTIONARY_PATH
    if not dict_path.is_file():
        logger.warning("Dictionary %s not found, waiting for PUT /words", dict_path)
        _boggle = Boggle()
        return
    logger.info("Loading dictionary from %s (min_length=%d)", dict_path, settings.MIN_WORD_LENGTH)
    _boggle.set_legal_words(load_words(str(dict_path), settings.MIN_WORD_LENGTH))


async def _json_body(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(400, "Request body must be JSON")
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _boggle
        _boggle = Boggle()
        _load_dictionary()
        yield

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        trie = _boggle.trie
        return {
            "status": "ok",
            "dictionary_loaded": trie is not None,
            "word_count": len(trie) if trie is not None else 0,
        }

    @application.put("/words")
    async def put_words(request: Request):
        body = await _json_body(request)
        words = body.get("words")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise HTTPException(400, "'words' must be a list of strings")
        _boggle.set_legal_words(words)
        return {"word_count": len(_boggle.trie)}

    @application.post("/solve")
    async def solve(request: Request):
        body = await _json_body(request)
        width, height, letters = body.get("width"), body.get("height"), body.get("letters")
        if not isinstance(width, int) or not isinstance(height, int):
            raise HTTPException(400, "'width' and 'height' must be integers")
        if letters is not None and not isinstance(letters, str):
            raise HTTPException(400, "'letters' must be a string")

        timer = StageTimer()
        with timer.stage("solve"):
            try:
                found = _boggle.solve_board(width, height, letters)
            except BoggleError as e:
                raise HTTPException(400, str(e))

        with timer.stage("rank"):
            words = rank_words(found, settings.MAX_RESULTS)

        logger.info("Board %dx%d: found %d words (returning %d)", width, height, len(found), len(words))
        return JSONResponse({
            "width": width,
            "height": height,
            "words": words,
            "word_count": len(found),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle_solver.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle_solver.settings import update_settings, get_editable_settings
        body = await _json_body(request)
        previous = {name: getattr(settings, name) for name in _DICTIONARY_FIELDS}
        errors = update_settings(settings, **body)
        if "LOG_LEVEL" in body and "LOG_LEVEL" not in errors:
            logger.setLevel(settings.LOG_LEVEL)
        if any(name in body and name not in errors for name in _DICTIONARY_FIELDS):
            try:
                _load_dictionary()
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Could not load dictionary %s: %s", settings.DICTIONARY_PATH, e)
                for name, value in previous.items():
                    setattr(settings, name, value)
                errors["DICTIONARY_PATH"] = f"cannot read dictionary: {e}"
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def run():
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


app = create_app()
