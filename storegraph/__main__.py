# storegraph/__main__.py
import uvicorn

from .settings import settings

if __name__ == "__main__":
    uvicorn.run("storegraph.main:app", host=settings.api_host, port=settings.api_port)
