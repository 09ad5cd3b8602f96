import httpx
import pytest

from cooknote.domain.errors import AIMalformedResponseError, AIServiceUnavailableError
from cooknote.domain.Ingredient import IngredientCategory
from cooknote.infra.ai_client import AnalysisClient, MOCK_DRAFT, draft_to_recipe, encode_image
from cooknote.utilities.validators import RecipeDraft

API_URL = "http://analysis.test/analyze"


def make_client(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AnalysisClient(api_url=API_URL, http_client=http, use_mock=False)


@pytest.mark.asyncio
async def test_analyze_returns_validated_draft():
    seen = {}

    def handler(request):
        seen["body"] = request.read()
        return httpx.Response(200, json={
            "name": "红烧肉",
            "ingredients": [
                {"name": "五花肉", "amount": "500g", "category": "肉禽类"},
                {"name": "冰糖", "amount": 12.7, "category": "糖类"},
            ],
            "steps": ["焯水", "炒糖色", "炖煮"],
        })

    draft = await make_client(handler).analyze([b"\xff\xd8raw", "YWJj"])
    assert draft.name == "红烧肉"
    assert draft.ingredients[0].amount == 500
    assert draft.ingredients[1].amount == 12
    assert draft.ingredients[1].category == IngredientCategory.OTHER.value
    assert b"YWJj" in seen["body"]


@pytest.mark.asyncio
async def test_non_2xx_uses_service_error_message():
    client = make_client(lambda request: httpx.Response(500, json={"error": "服务器配置错误：缺少 API_KEY"}))
    with pytest.raises(AIServiceUnavailableError) as info:
        await client.analyze(["YWJj"])
    assert "API_KEY" in str(info.value)
    assert info.value.status_code == 500


@pytest.mark.asyncio
async def test_non_2xx_without_json_body():
    client = make_client(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(AIServiceUnavailableError) as info:
        await client.analyze(["YWJj"])
    assert "503" in str(info.value)


@pytest.mark.asyncio
async def test_transport_failure_is_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AIServiceUnavailableError):
        await make_client(handler).analyze(["YWJj"])


@pytest.mark.asyncio
async def test_non_json_body_is_malformed():
    client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(AIMalformedResponseError):
        await client.analyze(["YWJj"])


@pytest.mark.asyncio
async def test_missing_name_is_malformed():
    client = make_client(lambda request: httpx.Response(200, json={"ingredients": []}))
    with pytest.raises(AIMalformedResponseError):
        await client.analyze(["YWJj"])


@pytest.mark.asyncio
async def test_blank_name_is_malformed():
    client = make_client(lambda request: httpx.Response(200, json={"name": "   ", "ingredients": [], "steps": []}))
    with pytest.raises(AIMalformedResponseError):
        await client.analyze(["YWJj"])

    blank_ingredient = {"name": "汤", "ingredients": [{"name": " "}], "steps": []}
    client = make_client(lambda request: httpx.Response(200, json=blank_ingredient))
    with pytest.raises(AIMalformedResponseError):
        await client.analyze(["YWJj"])


@pytest.mark.asyncio
async def test_image_count_is_checked_before_sending():
    def handler(request):
        raise AssertionError("no request expected")

    client = make_client(handler)
    with pytest.raises(ValueError):
        await client.analyze([])
    with pytest.raises(ValueError):
        await client.analyze(["YWJj"] * 7)


@pytest.mark.asyncio
async def test_mock_mode_skips_network():
    client = AnalysisClient(api_url="http://unused.invalid/analyze", use_mock=True)
    draft = await client.analyze(["YWJj"])
    assert draft.name == MOCK_DRAFT["name"]
    assert len(draft.ingredients) == 3


def test_encode_image():
    assert encode_image(b"abc") == "YWJj"
    assert encode_image("YWJj") == "YWJj"


def test_draft_to_recipe_assigns_ai_ids():
    draft = RecipeDraft.model_validate(MOCK_DRAFT)
    recipe = draft_to_recipe(draft, ["file:///a.jpg"], created_at=1700)
    assert recipe.id.startswith("ai-")
    assert [i.id for i in recipe.ingredients] == ["ai-ing-1700-0", "ai-ing-1700-1", "ai-ing-1700-2"]
    assert recipe.ingredients[0].category == IngredientCategory.SEAFOOD
    assert recipe.created_at == 1700
    assert recipe.cost is None
    assert recipe.image_uris == ["file:///a.jpg"]
    recipe.validate()
