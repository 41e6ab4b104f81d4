"""Shared fixtures for core unit tests"""

import copy

import pytest


SAMPLE_SKELETON = {
    "head": {
        "title": "Sample",
        "meta": [{"charset": "UTF-8"}],
    },
    "root": {"--accent": "#f00"},
    "classroom": [{"type": "class", "name": "card", "style": "padding:1rem;"}],
    "element": "body",
    "style": "margin:0;",
    "children": [
        {"element": "header", "children": [{"element": "div", "class": "logo", "style": "width:4rem;"}]},
        {"element": "div", "style": "color:red;"},
        {
            "element": "ul",
            "blueprint": {"count": 2, "element": "li", "class": "item-cwrapIndex", "text": "Item cwrapIndex+1"},
        },
        {"element": "div", "style": "color:blue;", "mediaQueries": [{"query": "max-width: 600px", "style": "color:green;"}]},
    ],
}


@pytest.fixture(name="sample_skeleton")
def sample_skeleton_fixture():
    return copy.deepcopy(SAMPLE_SKELETON)
