"""Template data models."""

from invite_gallery.models.template import LoadState as LoadState
from invite_gallery.models.template import Template as Template
from invite_gallery.models.template import TemplateData as TemplateData
from invite_gallery.models.template import TemplatePage as TemplatePage
