from whistle import configure_logging
from whistle.controller import create_app
from whistle.constants import APP_PORT, DEBUG_MODE


configure_logging()
app = create_app()

if __name__ == '__main__':
    # use_reloader=False evita subir dois processos quando DEBUG_MODE está ativo
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE, use_reloader=False)
