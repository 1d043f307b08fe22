import uvicorn

from .config import RC_HOST, RC_PORT
from .main import app

if __name__ == "__main__":
    uvicorn.run(app, host=RC_HOST, port=RC_PORT)
