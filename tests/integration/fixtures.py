"""Mock responses for Vine API integration tests."""

from __future__ import annotations

BASE_URL = "https://api.vineapp.com/"

AUTHENTICATE_SUCCESS_RESPONSE = {
    "code": "",
    "success": True,
    "error": "",
    "data": {
        "username": "Integration Tester",
        "userId": 914021455983943680,
        "key": "914021455983943680-2f7a1e5c-session",
    },
}

AUTHENTICATE_FAILURE_RESPONSE = {
    "code": "103",
    "success": False,
    "error": "Authenticate failed",
    "data": "",
}

POPULAR_PAGE_1_RESPONSE = {
    "code": "",
    "success": True,
    "error": "",
    "data": {
        "count": 2,
        "nextPage": 2,
        "records": [
            {"postId": 1111111111, "videoUrl": "https://v.cdn.vine.co/1.mp4", "username": "first"},
            {"postId": 2222222222, "videoUrl": "https://v.cdn.vine.co/2.mp4", "username": "second"},
        ],
    },
}

POPULAR_PAGE_2_RESPONSE = {
    "code": "",
    "success": True,
    "error": "",
    "data": {
        "count": 1,
        "nextPage": None,
        "records": [
            {"postId": 3333333333, "videoUrl": "https://v.cdn.vine.co/3.mp4", "username": "third"},
        ],
    },
}

PROFILE_RESPONSE = {
    "code": "",
    "success": True,
    "error": "",
    "data": {
        "userId": 914021455983943680,
        "username": "Integration Tester",
        "vanityUrls": ["integrationtester"],
        "followerCount": 12,
    },
}

SINGLE_POST_ARRAY_RESPONSE = [
    {"postId": 1234567890, "shareUrl": "https://vine.co/v/bK2Ql5j3xiE", "videoUrl": "https://v.cdn.vine.co/p.mp4"},
]

NOT_FOUND_RESPONSE = {
    "code": "900",
    "success": False,
    "error": "That record does not exist.",
    "data": "",
}
