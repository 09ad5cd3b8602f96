"""Default data used to populate an empty store on first run."""
from typing import List, Optional

from cooknote.domain.FamilyMember import FamilyMember
from cooknote.domain.Ingredient import Ingredient, IngredientCategory as C
from cooknote.domain.Recipe import Recipe, now_ms

DAY_MS = 86_400_000

_SEED_INGREDIENTS = [
    ("1", "鸡蛋", C.POULTRY_MEAT),
    ("2", "西红柿", C.VEGETABLE),
    ("3", "牛肉", C.POULTRY_MEAT),
    ("4", "青椒", C.VEGETABLE),
    ("5", "土豆", C.VEGETABLE),
    ("6", "大蒜", C.CONDIMENT),
    ("7", "猪肉", C.POULTRY_MEAT),
    ("8", "生姜", C.CONDIMENT),
    ("9", "大葱", C.CONDIMENT),
    ("10", "西兰花", C.VEGETABLE),
    ("11", "虾仁", C.SEAFOOD),
    ("12", "面条", C.STAPLE),
    ("13", "米饭", C.STAPLE),
]

_UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&w=800&q=80"


def default_ingredients() -> List[Ingredient]:
    """Common ingredients offered by the catalog before any recipe mentions them."""
    return [Ingredient(id=i, name=n, category=c) for i, n, c in _SEED_INGREDIENTS]


def default_recipes(now: Optional[int] = None) -> List[Recipe]:
    now = now_ms() if now is None else now
    ing = {i.id: i for i in default_ingredients()}
    return [
        Recipe(
            id="1", name="经典番茄炒蛋",
            image_uris=[_UNSPLASH.format("photo-1546069901-ba9599a7e63c"),
                        _UNSPLASH.format("photo-1590523277543-a94d2e4eb00b")],
            ingredients=[ing["1"], ing["2"]],
            steps=["准备番茄和鸡蛋", "热锅凉油", "炒熟鸡蛋备用", "炒番茄出汁", "混合"],
            created_at=now, is_favorite=True,
        ),
        Recipe(
            id="2", name="青椒炒牛肉",
            image_uris=["https://plus.unsplash.com/premium_photo-1664472314546-f642646279f1?auto=format&fit=crop&w=800&q=80"],
            ingredients=[ing["3"], ing["4"]],
            steps=["牛肉切片腌制", "青椒切块", "大火快炒牛肉", "加入青椒调味"],
            created_at=now - DAY_MS,
        ),
        Recipe(
            id="3", name="香煎三文鱼",
            image_uris=[_UNSPLASH.format("photo-1467003909585-2f8a72700288"),
                        _UNSPLASH.format("photo-1519708227418-c8fd9a32b7a2"),
                        _UNSPLASH.format("photo-1485921325833-c519f76c4927")],
            ingredients=[Ingredient(id="custom-1", name="三文鱼", category=C.SEAFOOD), ing["6"]],
            steps=["三文鱼吸干水分", "抹上盐和黑胡椒", "皮朝下小火慢煎", "加入黄油大蒜淋热油"],
            created_at=now - DAY_MS, is_favorite=True,
        ),
        Recipe(
            id="4", name="酸辣土豆丝",
            image_uris=[_UNSPLASH.format("photo-1582234372722-50d7ccc30ebd")],
            ingredients=[ing["5"], ing["9"]],
            steps=["土豆切丝泡水", "干辣椒葱花爆香", "大火快炒土豆丝", "出锅前淋陈醋"],
            created_at=now - 2 * DAY_MS,
        ),
        Recipe(
            id="5", name="清爽西兰花",
            image_uris=[_UNSPLASH.format("photo-1584270354949-c26b0d5b4a0c")],
            ingredients=[ing["10"], ing["6"]],
            steps=["西兰花掰小朵", "水开焯烫 1 分钟", "凉水冲凉保持色泽", "蒜末蚝油调味"],
            created_at=now - 3 * DAY_MS,
        ),
    ]


def default_family() -> List[FamilyMember]:
    return [
        FamilyMember(id="1", name="爸爸", color="#4DABF7"),
        FamilyMember(id="2", name="妈妈", color="#FF6B6B"),
        FamilyMember(id="3", name="宝宝", color="#FCC419"),
    ]
