from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
import logging, time
from typing import Dict, List

from spacex_tle import __version__
from spacex_tle.config import load_config
from spacex_tle.errors import UpstreamError
from spacex_tle.logs import setup_logging
from spacex_tle.service import MissionTleService

CONFIG = load_config()
setup_logging(CONFIG.log_level)
log = logging.getLogger("apps.api")

app = FastAPI(title="SpaceX Mission TLE API", version=__version__)

# One service per process; budget is created per request inside it
SERVICE = MissionTleService(CONFIG)


@app.middleware("http")
async def only_get(request: Request, call_next):
    if request.method != "GET":
        return PlainTextResponse("This method is not allowed", status_code=405)
    return await call_next(request)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": __version__,
        "txn_limit": CONFIG.txn_limit,
    }


# sync def: FastAPI runs it in the threadpool, upstream calls block
@app.get("/tle/{mission_id}", response_model=Dict[str, List[str]])
def mission_tles(mission_id: str):
    t0 = time.time()
    log.debug("Request: GET /tle/%s", mission_id)
    try:
        result = SERVICE.get_mission_tles(mission_id)
    except UpstreamError as e:
        log.error("Upstream failure for mission %s: %s", mission_id, e)
        raise HTTPException(status_code=502, detail=f"upstream_error: {e}")
    finally:
        log.info("GET /tle/%s took %.2f ms", mission_id, (time.time() - t0) * 1000)

    if result is None:
        return PlainTextResponse(f"No TLEs found for mission {mission_id}", status_code=404)
    return JSONResponse(result)


@app.get("/{path:path}")
def invalid_path(path: str):
    return PlainTextResponse(f"Invalid request path: /{path}", status_code=400)
