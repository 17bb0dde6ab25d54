"""Generate read-only accessor methods for marked Go structs.

Modules:
- goparse.py / goast.py: Go source loading (tree-sitter) and syntax tree.
- scan.py: Finds type declarations marked with the generate directive.
- typesig.py: Renders field type expressions back to Go source.
- imports.py: Tracks which imports the generated accessors use.
- build.py: Builds the ordered accessor model for one file.
- emit.py / formatting.py: Template rendering, formatting and output.
- generate.py: Runs the pipeline over a directory tree.
"""

__version__ = "0.1.0"

__all__ = [
	"goparse",
	"goast",
	"scan",
	"typesig",
	"imports",
	"build",
	"emit",
	"formatting",
	"generate",
	"model",
]
