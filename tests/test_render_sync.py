import pytest

from quatjulia.render_sync import RenderSync
from quatjulia.shader_source import RendererUnavailable

from conftest import FakeRenderer

PARAM_SETTERS = ('set_iterations', 'set_alt_color', 'set_alt_color_intensity', 'set_sphere_shrink')


@pytest.fixture
def sync(renderer, camera, params, clock):
    s = RenderSync(renderer, camera, params, clock)
    params.subscribe(s.on_param_changed)
    return s


def test_first_frame_pushes_everything(sync, renderer):
    sync.sync_frame(False)
    assert renderer.count('set_camera') == 1
    for setter in PARAM_SETTERS:
        assert renderer.count(setter) == 1
    assert renderer.count('set_time') == 1
    assert renderer.count('set_julia') == 1
    assert renderer.count('set_aspect_ratio') == 1
    assert renderer.count('set_pixel_size') == 1


def test_steady_frames_push_only_per_frame_uniforms(sync, renderer):
    sync.sync_frame(False)
    renderer.reset()

    sync.sync_frame(False)
    assert renderer.count('set_camera') == 0
    for setter in PARAM_SETTERS:
        assert renderer.count(setter) == 0
    assert renderer.count('set_time') == 1
    assert renderer.count('set_julia') == 1
    assert renderer.count('set_aspect_ratio') == 1
    assert renderer.count('set_pixel_size') == 1


def test_camera_pushed_when_changed(sync, renderer, camera):
    sync.sync_frame(False)
    renderer.reset()

    camera.translate(0.5, 0, 0)
    sync.sync_frame(camera.update())
    position, forward, right, up, fov = renderer.last('set_camera')
    assert position == pytest.approx([0.5, 0, 0])
    assert forward == pytest.approx([1, 0, 0])
    assert fov == 1


def test_initialize_forces_camera_push(sync, renderer, camera):
    sync.sync_frame(False)
    renderer.reset()

    camera.initialize()
    sync.sync_frame(camera.update())
    assert renderer.count('set_camera') == 1


def test_param_change_pushes_on_next_frame(sync, renderer, params):
    sync.sync_frame(False)
    renderer.reset()

    params.set_value('alt_color', 50)
    params.set_value('sphere_shrink', 2.0)
    sync.sync_frame(False)
    assert renderer.last('set_alt_color') == (0.5,)
    assert renderer.last('set_sphere_shrink') == (0.02,)
    assert renderer.last('set_iterations') == (33,)
    assert renderer.last('set_alt_color_intensity') == (9,)

    renderer.reset()
    sync.sync_frame(False)
    assert renderer.count('set_alt_color') == 0


def test_julia_drag_does_not_trigger_param_push(sync, renderer, params):
    sync.sync_frame(False)
    renderer.reset()

    params.set_value('julia_x', 0.1)
    sync.sync_frame(False)
    assert renderer.count('set_iterations') == 0
    assert renderer.last('set_julia')[0][0] == pytest.approx(0.1)


def test_time_and_phase_follow_clock(sync, renderer, params, clock, manual_time):
    params.julia_z = 0.0
    manual_time.advance(2.0)
    clock.tick()
    sync.sync_frame(False)

    assert renderer.last('set_time') == (pytest.approx(2.0),)
    julia = renderer.last('set_julia')[0]
    assert julia[2] == pytest.approx(params.rotation_rate * 2.0)


def test_resize_computes_aspect_and_pixel_size(sync, renderer):
    sync.resize(800, 600)
    assert renderer.resized[-1] == (800, 600, 800, 600)

    sync.sync_frame(False)
    assert renderer.last('set_aspect_ratio') == (pytest.approx(4 / 3),)
    assert renderer.last('set_pixel_size') == ((pytest.approx(1 / 800), pytest.approx(1 / 600)),)


def test_resolution_scale_change_resizes_canvas(sync, renderer, params):
    sync.resize(800, 600)
    params.set_value('resolution_scale', 0.5)
    assert renderer.resized[-1] == (400, 300, 800, 600)
    assert sync.viewport.pixel_size == pytest.approx((1 / 400, 1 / 300))
    assert sync.viewport.aspect_ratio == pytest.approx(4 / 3)


def test_resize_never_produces_empty_canvas(sync, renderer, params):
    params.set_value('resolution_scale', 0.5)
    sync.resize(1, 1)
    assert renderer.resized[-1][:2] == (1, 1)


class BrokenFramebufferRenderer(FakeRenderer):
    def resize(self, canvas_width, canvas_height, window_width, window_height):
        raise RendererUnavailable("Framebuffer is not complete")


def test_framebuffer_failure_reaches_caller(camera, params, clock):
    sync = RenderSync(BrokenFramebufferRenderer(), camera, params, clock)
    params.subscribe(sync.on_param_changed)

    with pytest.raises(RendererUnavailable):
        sync.resize(800, 600)
    # Resolution changes from the panel resize through the same path
    with pytest.raises(RendererUnavailable):
        params.set_value('resolution_scale', 0.5)
