import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    print(f"🚀 Starting {settings.APP_NAME} (store={settings.STORE_ADAPTER_TYPE}, videos={settings.VIDEO_INDEX_ADAPTER_TYPE})...")
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=settings.DEBUG)
