import os

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///erp.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join('static', 'enterprisefiles'))
    UPLOAD_URL_PREFIX = os.getenv('UPLOAD_URL_PREFIX', '/enterprisefiles')
    FUNCTIONS_PREFIX = os.getenv('FUNCTIONS_PREFIX', '/.netlify/functions')
    DEFAULT_PAGE_SIZE = int(os.getenv('DEFAULT_PAGE_SIZE', '10'))
    MAX_PAGE_SIZE = int(os.getenv('MAX_PAGE_SIZE', '500'))
    CORS_ALLOW_ORIGIN = os.getenv('CORS_ALLOW_ORIGIN', '*')
