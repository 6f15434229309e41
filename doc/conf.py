# xpathsteps documentation build configuration file

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join('..', 'src')))

import xpathsteps

extensions = ['sphinx.ext.autodoc', 'sphinx.ext.doctest']

#templates_path = ['templates']
exclude_patterns = ['build']
source_suffix = '.rst'
master_doc = 'index'

project = 'xpathsteps'
copyright = '2026, xpathsteps contributors'
version = '%d.%d' % xpathsteps.__version_info__[:2]
release = xpathsteps.__version__
modindex_common_prefix = ['xpathsteps.']

pygments_style = 'sphinx'

htmlhelp_basename = 'xpathstepsdoc'

latex_documents = [
  ('index', 'xpathsteps.tex', 'xpathsteps Documentation',
   'xpathsteps contributors', 'manual'),
]
