from fastapi.templating import Jinja2Templates

from welcome.core.config import settings

templates = Jinja2Templates(directory=str(settings.TEMPLATE_DIR))
