from pathlib import Path

from fastapi.templating import Jinja2Templates

# Shared instance for pages rendered directly by the web layer (error pages).
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")
