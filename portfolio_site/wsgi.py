"""
WSGI config for the portfolio site.

Empty collections are seeded with the default content before the
application starts serving requests.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'portfolio_site.settings')

application = get_wsgi_application()

from portfolio.seed import seed_on_startup  # noqa: E402

seed_on_startup()
