import sys
import os

# Add the project directory to the sys.path
project_home = os.environ.get('RECIPE_FEATURES_HOME', '/home/YOUR_USERNAME/recipe-features')
if project_home not in sys.path:
    sys.path.insert(0, project_home)

os.environ.setdefault('FLASK_ENV', 'production')
os.chdir(project_home)

from app import app as application, init_db

# Creates the stored_value table on first start
init_db()
