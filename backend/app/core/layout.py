"""
Root document shell shared by every page
"""
from typing import Optional, Union

from markupsafe import Markup

from app.core.metadata import SiteMetadata, get_metadata
from app.core.templates import jinja_env

LAYOUT_TEMPLATE = "layout.html"

Children = Union[str, Markup, None]


class RootLayout:
    """
    Wraps a pre-rendered fragment in the <html lang="en"><body> skeleton.

    The fragment is inserted as-is: it is neither escaped nor reparsed, so
    callers hand over HTML they have already rendered.
    """

    def __init__(self, template_name: str = LAYOUT_TEMPLATE, site: Optional[SiteMetadata] = None):
        self.template_name = template_name
        self.site = site or get_metadata()

    async def render(self, children: Children = None) -> str:
        """Render the full document around children"""
        template = jinja_env.get_template(self.template_name)
        return await template.render_async(
            site=self.site,
            children=Markup(children or ""),
        )

    async def __call__(self, children: Children = None) -> str:
        return await self.render(children)


root_layout = RootLayout()


async def render_root_layout(children: Children = None) -> str:
    """Render children inside the default root layout"""
    return await root_layout.render(children)
