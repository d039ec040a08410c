# run.py
from dotenv import load_dotenv
import os

basedir = os.path.abspath(os.path.dirname(__file__))
# Load the .env that sits next to this file before the app package reads its config.
load_dotenv(dotenv_path=os.path.join(basedir, '.env'))

from adoptme import create_app

app = create_app()

if __name__ == '__main__':
    host = os.getenv('FLASK_RUN_HOST', '127.0.0.1')
    port = int(os.getenv('FLASK_RUN_PORT', 5000))
    debug = app.config.get('DEBUG', False)
    app.run(host=host, port=port, debug=debug)
