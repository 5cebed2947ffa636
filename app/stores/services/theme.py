"""
Theme application: a store theme becomes a set of CSS custom properties
that the storefront sets on the document root.
"""

from app.stores.schemas.store import StoreTheme

# Font choices that are not literal CSS family names
_FONT_FAMILY_CSS = {"Monospace": "monospace"}


def theme_css_variables(theme: StoreTheme) -> dict[str, str]:
    return {
        "--primary-color": theme.primary_color,
        "--bg-color": theme.background_color,
        "--card-color": theme.card_color,
        "--parchment-color": theme.parchment_color,
        "--ink-color": theme.ink_color,
        "--border-radius": theme.border_radius,
        "--store-font": _FONT_FAMILY_CSS.get(theme.font_family, theme.font_family),
    }


def render_theme_css(theme: StoreTheme) -> str:
    """Render the theme variables as a ``:root`` stylesheet."""
    lines = [f"  {name}: {value};" for name, value in theme_css_variables(theme).items()]
    return ":root {\n" + "\n".join(lines) + "\n}\n"
