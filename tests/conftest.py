import pytest


def make_wallpaper(wallpaper_id: str = "94x38z", ext: str = "jpg") -> dict:
    return {
        "id": wallpaper_id,
        "url": f"https://wallhaven.cc/w/{wallpaper_id}",
        "short_url": f"https://whvn.cc/{wallpaper_id}",
        "views": 12,
        "favorites": 0,
        "source": "",
        "purity": "sfw",
        "category": "anime",
        "dimension_x": 6742,
        "dimension_y": 3534,
        "resolution": "6742x3534",
        "ratio": "1.91",
        "file_size": 5070446,
        "file_type": f"image/{'jpeg' if ext == 'jpg' else ext}",
        "created_at": "2018-10-31 01:23:10",
        "colors": ["#000000", "#abbcda"],
        "path": f"https://w.wallhaven.cc/full/{wallpaper_id[:2]}/wallhaven-{wallpaper_id}.{ext}",
        "thumbs": {
            "large": f"https://th.wallhaven.cc/lg/{wallpaper_id[:2]}/{wallpaper_id}.jpg",
            "original": f"https://th.wallhaven.cc/orig/{wallpaper_id[:2]}/{wallpaper_id}.jpg",
            "small": f"https://th.wallhaven.cc/small/{wallpaper_id[:2]}/{wallpaper_id}.jpg",
        },
    }


def make_tag(tag_id: int = 1) -> dict:
    return {
        "id": tag_id,
        "name": "anime",
        "alias": "Chinese cartoons",
        "category_id": 1,
        "category": "Anime & Manga",
        "purity": "sfw",
        "created_at": "2015-01-16 02:06:45",
    }


def make_search_payload(per_page=24, query="anime", wallpapers=None) -> dict:
    return {
        "data": wallpapers if wallpapers is not None else [make_wallpaper()],
        "meta": {
            "current_page": 1,
            "last_page": 10,
            "per_page": per_page,
            "total": 240,
            "query": query,
            "seed": None,
        },
    }


@pytest.fixture
def search_payload() -> dict:
    return make_search_payload()


@pytest.fixture
def wallpaper_payload() -> dict:
    data = make_wallpaper()
    data["uploader"] = {
        "username": "test-user",
        "group": "User",
        "avatar": {
            "200px": "https://wallhaven.cc/images/user/avatar/200/11_3339efb2a813.png",
            "128px": "https://wallhaven.cc/images/user/avatar/128/11_3339efb2a813.png",
            "32px": "https://wallhaven.cc/images/user/avatar/32/11_3339efb2a813.png",
            "20px": "https://wallhaven.cc/images/user/avatar/20/11_3339efb2a813.png",
        },
    }
    data["tags"] = [make_tag(1)]
    return {"data": data}


@pytest.fixture
def tag_payload() -> dict:
    return {"data": make_tag(1)}


@pytest.fixture
def settings_payload() -> dict:
    return {
        "data": {
            "thumb_size": "orig",
            "per_page": "24",
            "purity": ["sfw", "sketchy"],
            "categories": ["general", "anime", "people"],
            "resolutions": ["1920x1080"],
            "aspect_ratios": ["16x9"],
            "toplist_range": "6M",
            "tag_blacklist": ["blacklist tag"],
            "user_blacklist": [""],
        }
    }


@pytest.fixture
def collections_payload() -> dict:
    return {
        "data": [
            {"id": 15, "label": "Default", "views": 38, "public": 1, "count": 10},
            {"id": 17, "label": "Private", "views": 0, "public": 0, "count": 3},
        ]
    }
