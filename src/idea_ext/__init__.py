"""
idea-ext: IDE project-import settings for host build projects.

Collaborators attach named, typed settings sections to a project-level and a
module-level settings object. Each settings object renders its whole tree as
one JSON document that the IDE reads on project import.
"""

__version__ = "0.4.0"
