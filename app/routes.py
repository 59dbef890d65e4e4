from app.api import ContactController

ROUTES = [
    ContactController,
]
