import json
import logging
import re
from json import JSONDecodeError
from typing import List, Optional

import openai
from openai import OpenAI
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaError

from cooknote.domain.errors import AIMalformedResponseError
from cooknote.utilities.config import AI_API_KEY, AI_BASE_URL, AI_MODEL, AI_TIMEOUT_SECONDS
from cooknote.utilities.constants import ANALYZE_PROMPT, ANALYZE_JSON_FORMAT, MAX_ANALYZE_IMAGES
from cooknote.utilities.validators import AnalyzeRequest, RecipeDraft

logger = logging.getLogger(__name__)


# === Helper: Get OpenAI-compatible Client ===
def _get_openai_client() -> Optional[OpenAI]:
    """Return a client for the configured vision model, or None when AI_API_KEY is unset."""
    if not AI_API_KEY:
        return None
    return OpenAI(api_key=AI_API_KEY, base_url=AI_BASE_URL, timeout=AI_TIMEOUT_SECONDS)


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove markdown code fences and surrounding whitespace."""
    text = re.sub(r"```(?:json)?\n?(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    return re.sub(r",\s*(\}|\])", r"\1", text)


def parse_draft(content: str) -> RecipeDraft:
    """Turn the model's reply into a validated draft or raise AIMalformedResponseError."""
    text = _remove_trailing_commas(_strip_code_fences(content or ""))
    if not text:
        raise AIMalformedResponseError("AI 返回内容为空")
    try:
        return RecipeDraft.model_validate(json.loads(text))
    except (JSONDecodeError, SchemaError) as e:
        logger.error("Unparsable analysis output: %s", text[:500])
        raise AIMalformedResponseError("AI 返回的格式无法解析") from e


# === Recipe Analysis ===
def analyze_images(images: List[str], client: OpenAI) -> RecipeDraft:
    """Ask the vision model for a structured recipe from base64 JPEG images."""
    content = [{"type": "text", "text": ANALYZE_PROMPT + ANALYZE_JSON_FORMAT}]
    content += [
        {"type": "image_url", "image_url": {"url": f"data:image/jpeg;base64,{img}"}}
        for img in images
    ]
    response = client.chat.completions.create(
        model=AI_MODEL,
        messages=[{"role": "user", "content": content}],
        temperature=0.1,
        response_format={"type": "json_object"},
    )
    reply = response.choices[0].message.content if response.choices else None
    return parse_draft(reply or "")


# === FastAPI Endpoint ===
router = APIRouter()


@router.post("/analyze")
def analyze(body: AnalyzeRequest = Body(...)):
    images = body.image_list()
    if not images:
        return JSONResponse(status_code=400, content={"error": "未提供图片数据"})
    if len(images) > MAX_ANALYZE_IMAGES:
        return JSONResponse(status_code=400, content={"error": f"最多支持 {MAX_ANALYZE_IMAGES} 张图片"})

    client = _get_openai_client()
    if client is None:
        logger.warning("AI_API_KEY not set, cannot analyze images")
        return JSONResponse(status_code=500, content={"error": "服务器配置错误：缺少 API_KEY"})

    try:
        draft = analyze_images(images, client)
    except openai.OpenAIError as e:
        logger.error("Model call failed: %s", e)
        return JSONResponse(status_code=502, content={"error": "AI 服务调用失败"})
    except AIMalformedResponseError as e:
        return JSONResponse(status_code=502, content={"error": str(e)})
    return draft.model_dump()
