from flask_sqlalchemy import SQLAlchemy

# Инициализация расширений без привязки к конкретному приложению

# База данных
db = SQLAlchemy()
