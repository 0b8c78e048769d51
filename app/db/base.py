# /student-records/app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic or `create_all` inspects the metadata.

from .base_class import Base

from .models.student_models import Student, Subject, Mark
