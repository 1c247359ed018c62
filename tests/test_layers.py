from razel.layers import Layer, LayerStack


class Recording(Layer):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def on_attach(self):
        self.log.append(("attach", self.name))

    def on_detach(self):
        self.log.append(("detach", self.name))


def test_default_layer_name():
    assert Layer().name == "Layer"


def test_custom_layer_name():
    assert Layer("Example").name == "Example"


def test_overlays_stay_above_layers():
    stack = LayerStack()
    a, b, overlay = Layer("a"), Layer("b"), Layer("o")
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.push_layer(b)
    assert list(stack) == [a, b, overlay]
    assert len(stack) == 3


def test_reversed_is_top_down():
    stack = LayerStack()
    layers = [Layer("a"), Layer("b")]
    overlay = Layer("o")
    for layer in layers:
        stack.push_layer(layer)
    stack.push_overlay(overlay)
    assert list(reversed(stack)) == list(stack)[::-1]
    assert next(reversed(stack)) is overlay


def test_push_calls_on_attach():
    log = []
    stack = LayerStack()
    stack.push_layer(Recording("a", log))
    stack.push_overlay(Recording("o", log))
    assert log == [("attach", "a"), ("attach", "o")]


def test_pop_layer_detaches_and_removes():
    log = []
    stack = LayerStack()
    a = Recording("a", log)
    overlay = Recording("o", log)
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.pop_layer(a)
    assert list(stack) == [overlay]
    assert log[-1] == ("detach", "a")


def test_pop_layer_ignores_overlays():
    log = []
    stack = LayerStack()
    overlay = Recording("o", log)
    stack.push_overlay(overlay)
    stack.pop_layer(overlay)
    assert list(stack) == [overlay]
    assert ("detach", "o") not in log


def test_pop_overlay_ignores_ordinary_layers():
    log = []
    stack = LayerStack()
    a = Recording("a", log)
    stack.push_layer(a)
    stack.pop_overlay(a)
    assert list(stack) == [a]
    assert ("detach", "a") not in log


def test_pop_overlay_removes_overlay():
    stack = LayerStack()
    a, overlay = Layer("a"), Layer("o")
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.pop_overlay(overlay)
    assert list(stack) == [a]


def test_pop_unknown_layer_is_ignored():
    stack = LayerStack()
    a = Layer("a")
    stack.push_layer(a)
    stack.pop_layer(Layer("a"))
    assert list(stack) == [a]


def test_insert_point_moves_back_after_pop():
    stack = LayerStack()
    a, b, c, overlay = Layer("a"), Layer("b"), Layer("c"), Layer("o")
    stack.push_layer(a)
    stack.push_layer(b)
    stack.push_overlay(overlay)
    stack.pop_layer(a)
    stack.push_layer(c)
    assert list(stack) == [b, c, overlay]


def test_iteration_is_a_snapshot():
    stack = LayerStack()
    a = Layer("a")
    stack.push_layer(a)
    seen = []
    for layer in stack:
        seen.append(layer)
        stack.push_overlay(Layer("late"))
    assert seen == [a]
    assert len(stack) == 2