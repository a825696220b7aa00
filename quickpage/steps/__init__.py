"""Import all steps to trigger registration."""

from quickpage.steps.s1_classify import ClassifyStep  # noqa: F401
from quickpage.steps.s2_content import ContentStep  # noqa: F401
from quickpage.steps.s3_layout import LayoutStep  # noqa: F401
from quickpage.steps.s4_render import RenderStep  # noqa: F401
