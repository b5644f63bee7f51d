import copy

import pytest

from perfectform.scene import Scene
from perfectform.textures import TextureManager


class CountingScene(Scene):
    def __init__(self, textures):
        super().__init__(textures)
        self.elapsed = 0
        self.events = []
        self.frames = 0

    def update(self, step_ms):
        self.elapsed += step_ms

    def handle_event(self, event):
        self.events.append(event)

    def render(self):
        self.frames += 1


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene(TextureManager())


def test_scene_keeps_textures():
    textures = TextureManager()
    scene = CountingScene(textures)
    assert scene.textures is textures


def test_textures_cannot_be_reassigned():
    scene = CountingScene(TextureManager())
    with pytest.raises(AttributeError):
        scene.textures = TextureManager()


def test_subclass_methods_run():
    scene = CountingScene(TextureManager())
    scene.update(10)
    scene.update(15)
    scene.handle_event("key")
    scene.render()
    assert scene.elapsed == 25
    assert scene.events == ["key"]
    assert scene.frames == 1


def test_scene_cannot_be_copied():
    scene = CountingScene(TextureManager())
    with pytest.raises(TypeError):
        copy.copy(scene)
    with pytest.raises(TypeError):
        copy.deepcopy(scene)