import uvicorn

from agenda.core.config import settings

if __name__ == "__main__":
    uvicorn.run("agenda.main:app", host=settings.host, port=settings.port, reload=settings.debug)
