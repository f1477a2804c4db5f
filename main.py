import uvicorn
from videotube.application import application
from videotube.config.environments import PORT

if __name__ == "__main__":
    uvicorn.run(
        application,
        host="0.0.0.0",
        port=PORT,
        reload=False
    )
