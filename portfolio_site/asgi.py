import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'portfolio_site.settings')

application = get_asgi_application()

from portfolio.seed import seed_on_startup  # noqa: E402

seed_on_startup()
