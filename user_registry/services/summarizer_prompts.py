"""Prompt templates for file summarization."""

FILE_TYPE_CONTEXT = {
    ".go": "This is a Go source code file.",
    ".py": "This is a Python source code file.",
    ".js": "This is a JavaScript/TypeScript source code file.",
    ".ts": "This is a JavaScript/TypeScript source code file.",
    ".java": "This is a Java source code file.",
    ".cpp": "This is a C++ source code file.",
    ".cc": "This is a C++ source code file.",
    ".cxx": "This is a C++ source code file.",
    ".c": "This is a C source code file.",
    ".rs": "This is a Rust source code file.",
    ".md": "This is a Markdown documentation file.",
    ".txt": "This is a plain text file.",
    ".json": "This is a JSON data file.",
    ".yaml": "This is a YAML configuration file.",
    ".yml": "This is a YAML configuration file.",
    ".xml": "This is an XML file.",
    ".html": "This is an HTML file.",
    ".css": "This is a CSS stylesheet file.",
    ".sql": "This is a SQL database script file.",
}

DEFAULT_FILE_TYPE_CONTEXT = "This is a text file."


def get_file_type_context(extension: str) -> str:
    """Describe a file by its extension (including the leading dot)."""
    return FILE_TYPE_CONTEXT.get(extension, DEFAULT_FILE_TYPE_CONTEXT)


def get_summarization_prompt(content: str, filename: str, extension: str) -> str:
    """Generate prompt for summarizing a file."""
    return f"""Please provide a clear and concise summary of the following file:

File: {filename}
{get_file_type_context(extension)}

Content:
{content}

Please summarize:
1. What this file is about
2. Key components, functions, or sections (if applicable)
3. Main purpose or functionality
4. Any important details or notable features

Keep the summary informative but concise."""
