import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from taskdesk import store
from taskdesk.core import config
from taskdesk.core.errors import InternalError
from taskdesk.database import SessionLocal, engine, init_schema
from taskdesk.routes import admin_routes, auth_routes, student_routes
from taskdesk.services import accounts

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

API_VERSION = '1.0.0'

app = FastAPI(title='Student Task Management API', version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=config.CORS_ALLOW_ORIGINS != ['*'],
    allow_methods=['*'],
    allow_headers=['*'],
)


def format_validation_errors(errors) -> str:
    messages = []
    for error in errors:
        field = next((str(part) for part in reversed(error.get('loc', ())) if part != 'body'), 'body')
        if error.get('type') == 'missing':
            messages.append(f'{field} is required')
        else:
            messages.append(error.get('msg', 'Invalid value').removeprefix('Value error, '))
    return '; '.join(messages) or 'Invalid request'


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': format_validation_errors(exc.errors())},
    )


@app.exception_handler(store.StoreError)
async def handle_store_error(request: Request, exc: store.StoreError) -> JSONResponse:
    logger.error('Record store failure on %s %s', request.method, request.url.path, exc_info=exc)
    return await http_exception_handler(request, InternalError('Internal server error'))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error('Unhandled error on %s %s', request.method, request.url.path, exc_info=exc)
    return await http_exception_handler(request, InternalError('Internal server error'))


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        init_schema(engine)
        db = SessionLocal()
        try:
            accounts.ensure_initial_admin(db, config.ADMIN_EMAIL, config.ADMIN_PASSWORD)
        finally:
            db.close()
    except (SQLAlchemyError, store.StoreError):
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')
        raise


@app.get('/')
def root():
    return {
        'message': 'Student Task Management API',
        'version': API_VERSION,
        'endpoints': {
            'health': '/health',
            'auth': '/api/auth',
            'admin': '/api/admin',
            'student': '/api/student',
        },
    }


@app.get('/health')
def health():
    return {'status': 'OK', 'timestamp': datetime.now(timezone.utc).isoformat()}


app.include_router(auth_routes.router, prefix='/api/auth')
app.include_router(admin_routes.router, prefix='/api/admin')
app.include_router(student_routes.router, prefix='/api/student')
