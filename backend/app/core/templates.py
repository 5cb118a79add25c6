"""
Template rendering utilities
"""
from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.core.config import get_settings
from app.core.metadata import get_metadata

_settings = get_settings()
TEMPLATES_DIR = _settings.resolved_templates_dir


def static_url(path: str) -> str:
    """URL of a file under the static mount"""
    return f"{get_settings().static_url_path}/{path.lstrip('/')}"


def _install_globals(env: Environment) -> Environment:
    env.globals["site"] = get_metadata()
    env.globals["static_url"] = static_url
    return env


# Standalone environment for rendering outside a request
jinja_env = _install_globals(Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    enable_async=True,
))

# Create FastAPI templates instance
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
_install_globals(templates.env)


def render_template(template_name: str, context: dict, request: Request, status_code: int = 200):
    """Render template with context"""
    return templates.TemplateResponse(
        request,
        template_name,
        context,
        status_code=status_code,
    )
