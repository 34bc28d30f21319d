from config import resolve_port
from gamedev_server import create_app

app = create_app()

if __name__ == '__main__':
    port = resolve_port(app.config.get('PORT'))
    app.logger.info(f"{app.config['APP_NAME']} listening at http://0.0.0.0:{port}")
    app.run(host='0.0.0.0', port=port, debug=False)
