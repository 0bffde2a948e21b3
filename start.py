import os
import logging

from flask import Flask

from gava import Gava, load_settings
from gava.flask_webhook import create_webhook_blueprint

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('start')


def log_paid_checkout(checkout):
    logger.info(f"Paid checkout {checkout.reference}: {checkout.amount} via {checkout.payment_method or 'unknown'}")


def create_app(settings=None):
    settings = settings or load_settings()
    client = Gava(settings.api_url, settings.secret, timeout=settings.timeout)

    app = Flask(__name__)
    app.register_blueprint(create_webhook_blueprint(client, on_paid=log_paid_checkout, path=settings.webhook_path))
    return app


if __name__ == "__main__":
    app = create_app()
    port = int(os.environ.get('PORT', 5001))
    logger.info(f"Starting Gava webhook receiver on port {port}")
    app.run(debug=True, host='0.0.0.0', port=port)
