from flask import Flask
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

csrf = CSRFProtect()

def create_app(test_config=None):
    # Validate required environment variables
    if not test_config:
        required_vars = ['SECRET_KEY']
        for var in required_vars:
            if not os.getenv(var):
                raise ValueError(f"Required environment variable {var} is not set")
    
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)
    
    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)
    
    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Initialize extensions
    csrf.init_app(app)
    
    # Register blueprints
    from app.routes.main import main_bp
    from app.projects.calculator.routes import calculator_bp
    
    app.register_blueprint(main_bp)
    app.register_blueprint(calculator_bp)  # Has its own url_prefix defined
    
    return app
