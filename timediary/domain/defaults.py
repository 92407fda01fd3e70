"""Seed data written to a fresh store, plus the fixed category catalog."""
from __future__ import annotations

from .models import Category, Diary, Stats, User

DEFAULT_AUTHOR = "时光行者"
BASELINE_TOTAL_USERS = 5000


def default_diaries() -> list[Diary]:
    return [
        Diary(
            id="1",
            title="雨中的宁静",
            content=(
                "窗外的雨滴轻轻敲打着玻璃，带来一份难得的宁静。我喜欢这样的天气，让人可以静下心来，"
                "思考生活中的点点滴滴。雨声如同大自然的交响乐，每一滴雨都在诉说着自己的故事。"
                "泡一杯热茶，坐在窗边，看着窗外的世界被雨水洗涤，心情也变得清新起来。"
            ),
            excerpt="窗外的雨滴轻轻敲打着玻璃，带来一份难得的宁静...",
            cover_image="/diary-rain.jpg",
            category="生活",
            date="2024-01-15",
            views=1234,
            comments=[],
            author=DEFAULT_AUTHOR,
        ),
        Diary(
            id="2",
            title="咖啡与午后",
            content=(
                "阳光透过咖啡馆的窗户，在桌面上投下斑驳的光影。我喜欢在这样的午后，找一个安静的角落，"
                "品味一杯香浓的咖啡。咖啡的香气在空气中弥漫，伴随着轻柔的音乐，时间仿佛慢了下来。"
                "这是属于自己的时光，可以阅读、思考，或者只是发呆。"
            ),
            excerpt="阳光透过咖啡馆的窗户，在桌面上投下斑驳的光影...",
            cover_image="/diary-coffee.jpg",
            category="随笔",
            date="2024-01-14",
            views=987,
            comments=[],
            author=DEFAULT_AUTHOR,
        ),
        Diary(
            id="3",
            title="城市的黄昏",
            content=(
                "夕阳西下，整座城市被染成了金黄色。站在高处俯瞰，楼宇间的光影交错，构成了一幅美丽的画卷。"
                "城市的黄昏总是让人感到既熟悉又陌生，熟悉的是每天都在这里生活，陌生的是每一次黄昏都有不同的美。"
                "这是属于城市的诗意时刻。"
            ),
            excerpt="夕阳西下，整座城市被染成了金黄色...",
            cover_image="/diary-city.jpg",
            category="摄影",
            date="2024-01-13",
            views=2156,
            comments=[],
            author=DEFAULT_AUTHOR,
        ),
    ]


def default_users() -> list[User]:
    return [User(id="1", username=DEFAULT_AUTHOR, created_at="2024-01-01")]


def default_stats() -> Stats:
    return Stats(total_views=50000, total_diaries=200, total_users=BASELINE_TOTAL_USERS)


CATEGORIES: tuple[Category, ...] = (
    Category("life", "生活", "日常生活的点滴记录", "/category-life.jpg"),
    Category("travel", "旅行", "探索世界的美好", "/category-travel.jpg"),
    Category("food", "美食", "味蕾的奇妙旅程", "/category-food.jpg"),
    Category("photo", "摄影", "用镜头捕捉瞬间", "/category-photo.jpg"),
    Category("essay", "随笔", "随心的思考与感悟", "/category-essay.jpg"),
    Category("music", "音乐", "旋律中的故事", "/category-music.jpg"),
    Category("movie", "电影", "银幕内外的世界", "/category-movie.jpg"),
    Category("book", "读书", "文字带来的启发", "/category-book.jpg"),
)
