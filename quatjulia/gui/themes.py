import imgui

# --- Defined Palette ---
bg_overlay = (0.05, 0.06, 0.09, 0.78)    # Translucent so the fractal shows through
panel_dark = (0.12, 0.14, 0.20, 1.0)     # Frames behind sliders
accent = (0.16, 0.42, 0.72, 1.0)         # Slider grabs, active header
hover = (0.30, 0.60, 0.92, 1.0)          # Hover/Active state
text_light = (0.88, 0.91, 0.96, 1.0)

muted_accent = (0.10, 0.22, 0.38, 1.0)
border_color = (0.22, 0.26, 0.34, 1.0)


def setup_theme():
    style = imgui.get_style()

    # Backgrounds
    style.colors[imgui.COLOR_WINDOW_BACKGROUND] = bg_overlay
    style.colors[imgui.COLOR_POPUP_BACKGROUND] = panel_dark

    # Text & Borders
    style.colors[imgui.COLOR_TEXT] = text_light
    style.colors[imgui.COLOR_TEXT_DISABLED] = (0.5, 0.55, 0.6, 1.0)
    style.colors[imgui.COLOR_BORDER] = border_color
    style.colors[imgui.COLOR_BORDER_SHADOW] = (0.0, 0.0, 0.0, 0.0)

    # Sliders
    style.colors[imgui.COLOR_FRAME_BACKGROUND] = panel_dark
    style.colors[imgui.COLOR_FRAME_BACKGROUND_HOVERED] = (0.18, 0.21, 0.29, 1.0)
    style.colors[imgui.COLOR_FRAME_BACKGROUND_ACTIVE] = muted_accent
    style.colors[imgui.COLOR_SLIDER_GRAB] = accent
    style.colors[imgui.COLOR_SLIDER_GRAB_ACTIVE] = hover

    # Collapsing headers
    style.colors[imgui.COLOR_HEADER] = muted_accent
    style.colors[imgui.COLOR_HEADER_HOVERED] = accent
    style.colors[imgui.COLOR_HEADER_ACTIVE] = hover

    style.colors[imgui.COLOR_TITLE_BACKGROUND] = panel_dark
    style.colors[imgui.COLOR_TITLE_BACKGROUND_ACTIVE] = accent
    style.colors[imgui.COLOR_TITLE_BACKGROUND_COLLAPSED] = panel_dark

    # Geometry
    style.window_padding = (10, 10)
    style.frame_padding = (5, 3)
    style.item_spacing = (6, 4)

    style.frame_rounding = 2.0
    style.window_rounding = 5.0
    style.grab_rounding = 3.0
