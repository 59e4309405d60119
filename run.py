# run.py

import uvicorn
from uastats.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "uastats.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
    )
