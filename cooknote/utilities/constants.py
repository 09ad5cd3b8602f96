from typing import Final

RECIPES_KEY: Final[str] = "@cooknote_recipes"
FAMILY_KEY: Final[str] = "@cooknote_family"

FAVORITES_TITLE: Final[str] = "我的收藏"
TODAY_TITLE: Final[str] = "今天"
YESTERDAY_TITLE: Final[str] = "昨天"
DAY_TITLE_FORMAT: Final[str] = "{month}月{day}日"

PRESET_COLORS: Final[tuple[str, ...]] = (
    "#FF6B6B", "#4DABF7", "#FCC419", "#51CF66",
    "#BE4BDB", "#FF922B", "#22B8CF", "#845EF7",
)

QUICK_PICK_LIMIT: Final[int] = 10
COST_TOLERANCE: Final[float] = 0.01
MAX_ANALYZE_IMAGES: Final[int] = 6
AI_RECIPE_PREFIX: Final[str] = "ai-"

ANALYZE_PROMPT: Final[str] = (
    """你是一个精准的菜谱数字化专家。请通过 OCR 识别文字和图像分析，将这些菜谱图转化为结构化数据。

### 输出规则：
1. **菜名 (name)**：提取图片标题或视觉重心中的菜肴名称，需简练。
2. **食材 (ingredients)**：
   - 提取所有主要食材。
   - **名称 (name)**：食材的名称。
   - **分类 (category)**：从以下固定分类中选其一：[肉禽类, 蔬菜类, 调料类, 海鲜类, 主食类, 其他]。
   - **重量 (amount)**：将文字描述统一转换为纯数字（单位为克），没有标注则估算一个合理的克数。
3. **步骤 (steps)**：将复杂的描述提炼为 3-8 个短句组成的列表。

### 约束条件：
- 仅输出 JSON 格式，不要包含 Markdown 代码块。
"""
)
ANALYZE_JSON_FORMAT: Final[str] = (
    """
{
  "name": "菜名",
  "ingredients": [{"name": "名称", "amount": 100, "category": "分类"}],
  "steps": ["第一步...", "第二步..."]
}
"""
)
