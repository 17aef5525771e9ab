import logging

from ztrain import config, create_app

app = create_app()

if __name__ == '__main__':
    logging.getLogger(__name__).info("Server running on port %s", config.PORT)
    app.run(host=config.HOST, port=config.PORT)
