import sys
import os.path

import sphinx_rtd_theme

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

import btclimate

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.todo', 'sphinx.ext.viewcode'
]
project = 'btclimate'
source_suffix = '.rst'
master_doc = 'index'

version = release = btclimate.__version__
copyright = 'Artur Wroblewski'

epub_basename = 'btclimate - {}'.format(version)
epub_author = 'Artur Wroblewski'

todo_include_todos = True

html_theme = 'sphinx_rtd_theme'

# vim: sw=4:et:ai
