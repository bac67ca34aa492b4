import logging
from typing import List, Literal

from fastapi import FastAPI, UploadFile, File, HTTPException, Response

from geotargets.config import get_settings
from geotargets.errors import FatalParseError
from geotargets.models import EntitiesResponse, HealthResponse, LocationEntity, LocationType
from geotargets.normalize import normalize_dataset
from geotargets.writers import bucket_counts, group_by_bucket, render_csv, render_json

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="geotargets",
    description="Normalization of geotargeting datasets into per-type buckets",
    version="0.1.0",
)

MEDIA_TYPES = {"csv": "text/csv", "json": "application/json"}


async def _read_entities(file: UploadFile) -> List[LocationEntity]:
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    settings = get_settings()
    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Dataset exceeds the upload size limit")

    try:
        return normalize_dataset(raw, settings)
    except FatalParseError as exc:
        logger.error("Rejected dataset %s: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/entities", response_model=EntitiesResponse)
async def parse_entities(file: UploadFile = File(...)):
    entities = await _read_entities(file)
    buckets = group_by_bucket(entities)

    return {
        "counts": bucket_counts(buckets),
        "total": len(entities),
        "buckets": {
            name: [entity.to_output() for entity in members]
            for name, members in buckets.items()
        },
    }


@app.post("/entities/{bucket}")
async def export_bucket(
    bucket: str,
    file: UploadFile = File(...),
    format: Literal["csv", "json"] = "csv",
):
    location_type = LocationType.from_bucket(bucket)
    if location_type is None:
        raise HTTPException(status_code=404, detail=f"Unknown bucket: {bucket}")

    entities = await _read_entities(file)
    members = group_by_bucket(entities)[bucket]
    body = render_csv(members) if format == "csv" else render_json(members)

    logger.info("Built %s.%s (%d entities)", bucket, format, len(members))
    return Response(content=body, media_type=MEDIA_TYPES[format])
