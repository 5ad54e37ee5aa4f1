import io
import traceback
from typing import List

import httpx
from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import Response
from loguru import logger
from pydantic import BaseModel, Field, HttpUrl

from article_cloud.application.errors import ArticleCloudError
from article_cloud.application.log_setup import setup_logging
from article_cloud.application.services.aggregator import top_words
from article_cloud.application.services.pipeline import CloudPipeline
from article_cloud.application.services.renderer import RenderConfig
from article_cloud.application.settings import Settings, get_settings

# Configure logging once
setup_logging()

app = FastAPI(title="Article Word Cloud")


# --- Dependencies ---
def settings_dep() -> Settings:
    return get_settings()


def _fail(url: str, e: Exception) -> HTTPException:
    # Log full traceback in server logs, return a readable error to the client
    logger.error("Word cloud request failed for url='{}': {}\n{}", url, e, traceback.format_exc())
    return HTTPException(status_code=422, detail=f"{type(e).__name__}: {e}")


# Single pipeline instance for the app lifetime; it only holds read-only state
_pipeline: CloudPipeline | None = None
def pipeline_dep(settings: Settings = Depends(settings_dep)) -> CloudPipeline:
    global _pipeline
    # Lazy initialization; build on first request, retry on the next one if it fails
    if _pipeline is None:
        try:
            _pipeline = CloudPipeline.build(settings)
        except (OSError, ArticleCloudError) as e:
            raise _fail(settings.source_url, e)
    return _pipeline


# --- Schemas ---
class FrequencyRequest(BaseModel):
    url: HttpUrl
    limit: int = Field(20, ge=1, le=500)


class WordCount(BaseModel):
    word: str
    count: int


class FrequencyResponse(BaseModel):
    url: str
    text_length: int
    word_count: int
    distinct_words: int
    top: List[WordCount]


class CloudRequest(BaseModel):
    url: HttpUrl


# --- Endpoints ---
@app.get("/", tags=["meta"])
def root(settings: Settings = Depends(settings_dep)):
    return {
        "ok": True,
        "app_name": settings.app_name,
        "environment": settings.app_env,
        "debug": settings.debug,
    }


@app.post("/frequencies", tags=["cloud"], response_model=FrequencyResponse)
def frequencies(body: FrequencyRequest, pipeline: CloudPipeline = Depends(pipeline_dep)):
    url = str(body.url)
    try:
        analysis = pipeline.analyze(url)
    except (httpx.HTTPError, ArticleCloudError) as e:
        raise _fail(url, e)

    return FrequencyResponse(
        url=analysis.url,
        text_length=analysis.text_length,
        word_count=analysis.word_count,
        distinct_words=len(analysis.frequencies),
        top=[WordCount(word=w, count=c) for w, c in top_words(analysis.frequencies, body.limit)],
    )


@app.post("/cloud", tags=["cloud"])
def cloud(body: CloudRequest, pipeline: CloudPipeline = Depends(pipeline_dep)):
    url = str(body.url)
    try:
        analysis = pipeline.analyze(url)
        image = pipeline.renderer.render(analysis.frequencies, RenderConfig.from_settings(pipeline.settings))
    except (httpx.HTTPError, ArticleCloudError) as e:
        raise _fail(url, e)

    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return Response(content=buf.getvalue(), media_type="image/png")
