"""Client for the image-to-recipe analysis service (POST /analyze)."""
import asyncio
import base64
import logging
from typing import List, Optional, Union

import httpx
from pydantic import ValidationError as SchemaError

from cooknote.domain.errors import AIMalformedResponseError, AIServiceUnavailableError
from cooknote.domain.Ingredient import Ingredient, IngredientCategory
from cooknote.domain.Recipe import Recipe, new_ai_recipe_id, now_ms
from cooknote.utilities.config import AI_API_URL, AI_TIMEOUT_SECONDS, USE_MOCK_AI
from cooknote.utilities.constants import MAX_ANALYZE_IMAGES
from cooknote.utilities.validators import RecipeDraft

logger = logging.getLogger(__name__)

MOCK_DRAFT = {
    "name": "香煎三文鱼配时蔬",
    "ingredients": [
        {"name": "三文鱼", "amount": 200, "category": IngredientCategory.SEAFOOD.value},
        {"name": "西兰花", "amount": 100, "category": IngredientCategory.VEGETABLE.value},
        {"name": "大蒜", "amount": 10, "category": IngredientCategory.CONDIMENT.value},
    ],
    "steps": [
        "三文鱼洗净擦干表面水分，撒少许盐和黑胡椒腌制10分钟",
        "西兰花切小朵烧水烫熟备用",
        "热锅下油，三文鱼皮朝下中火煎至焦脆再翻面",
        "放入蒜片煎香，三文鱼四面煎熟即可出盘",
    ],
}


def encode_image(image: Union[bytes, str]) -> str:
    """Base64 text for raw bytes; strings are assumed to be base64 already."""
    if isinstance(image, bytes):
        return base64.b64encode(image).decode("ascii")
    return image


class AnalysisClient:
    def __init__(self, api_url: str = AI_API_URL, http_client: Optional[httpx.AsyncClient] = None,
                 timeout: float = AI_TIMEOUT_SECONDS, use_mock: bool = USE_MOCK_AI, mock_delay: float = 0.0):
        self.api_url = api_url
        self.http_client = http_client
        self.timeout = timeout
        self.use_mock = use_mock
        self.mock_delay = mock_delay

    async def _post(self, payload: dict) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.post(self.api_url, json=payload, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self.api_url, json=payload)

    async def analyze(self, images: List[Union[bytes, str]]) -> RecipeDraft:
        """Send 1-6 images, return the validated draft.

        Raises AIServiceUnavailableError for transport/HTTP failures and
        AIMalformedResponseError when a 2xx body is not a recipe draft.
        """
        if not images or len(images) > MAX_ANALYZE_IMAGES:
            raise ValueError(f"Provide between 1 and {MAX_ANALYZE_IMAGES} images.")

        if self.use_mock:
            logger.info("Using mock analysis result")
            await asyncio.sleep(self.mock_delay)
            return RecipeDraft.model_validate(MOCK_DRAFT)

        payload = {"images": [encode_image(img) for img in images]}
        try:
            resp = await self._post(payload)
        except httpx.HTTPError as e:
            logger.error("Analysis request failed: %s", e)
            raise AIServiceUnavailableError("连接 AI 服务失败，请检查网络或稍后再试") from e

        if resp.status_code < 200 or resp.status_code >= 300:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = body.get("error") if isinstance(body, dict) else None
            message = message or f"识别失败 ({resp.status_code})"
            logger.error("Analysis service answered %s: %s", resp.status_code, message)
            raise AIServiceUnavailableError(message, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Analysis service returned non-JSON body")
            raise AIMalformedResponseError("AI 返回的格式无法解析") from e
        try:
            return RecipeDraft.model_validate(data)
        except SchemaError as e:
            logger.error("Analysis service returned an invalid draft: %s", e)
            raise AIMalformedResponseError("AI 返回的菜谱结构不完整") from e


def draft_to_recipe(draft: RecipeDraft, image_uris: List[str], created_at: Optional[int] = None) -> Recipe:
    """Unsaved recipe built from an analysis draft, with AI-prefixed ids."""
    stamp = now_ms() if created_at is None else created_at
    ingredients = [
        Ingredient(id=f"ai-ing-{stamp}-{idx}", name=ing.name.strip(), category=ing.category, amount=ing.amount)
        for idx, ing in enumerate(draft.ingredients)
    ]
    return Recipe(
        id=new_ai_recipe_id(),
        name=draft.name.strip(),
        image_uris=image_uris,
        ingredients=ingredients,
        steps=[s for s in draft.steps if s.strip()] or None,
        created_at=stamp,
    )
