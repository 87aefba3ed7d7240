APP_ORG = "MarkdownPad"
APP_NAME = "MarkdownPad"

# Quiescence window for live preview updates.
PREVIEW_DEBOUNCE_MS = 300

IMAGES_DIR_NAME = "images"
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"})
SCREENSHOT_NAME_FORMAT = "screenshot_%Y%m%d_%H%M%S.png"

STATUS_TIMEOUT_MS = 3000

# Light scheme only; the preview does not follow the host theme.
CSS_PREVIEW = """
:root { color-scheme: light; }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif;
       line-height: 1.6; padding: 20px; max-width: 100%; color: #333; background-color: #ffffff; }
h1,h2,h3,h4,h5,h6 { margin-top: 24px; margin-bottom: 16px; font-weight: 600; line-height: 1.25;
                    border-bottom: 1px solid #eaecef; padding-bottom: .3em; }
h1 { font-size: 2em; } h2 { font-size: 1.5em; } h3 { font-size: 1.25em; }
code { background-color: #f6f8fa; padding: .2em .4em; border-radius: 3px;
       font-family: Consolas, Monaco, monospace; font-size: 85%; }
pre { background-color: #f6f8fa; padding: 16px; overflow: auto; border-radius: 6px; }
pre code { background: none; padding: 0; }
blockquote { margin: 0; padding: 0 1em; color: #6a737d; border-left: .25em solid #dfe2e5; }
table { border-collapse: collapse; width: 100%; margin: 16px 0; }
th, td { border: 1px solid #dfe2e5; padding: 6px 13px; }
th { background-color: #f6f8fa; font-weight: 600; }
tr:nth-child(even) { background-color: #f6f8fa; }
img { max-width: 100%; height: auto; }
a { color: #0366d6; text-decoration: none; } a:hover { text-decoration: underline; }
hr { border: 0; height: 1px; background: #e1e4e8; margin: 24px 0; }
ul,ol { padding-left: 2em; }
li { margin: .25em 0; }
.task-list-item { list-style: none; }
.task-list-item input { margin-right: .5em; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="color-scheme" content="light" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

MARKDOWN_GUIDE = """# Markdown Guide

## Basic formatting

### Headings
# Heading 1
## Heading 2
### Heading 3

### Emphasis
**bold** or __bold__
*italic* or _italic_
~~strikethrough~~

### Lists
Bullets:
- Item 1
- Item 2
  - Sub item

Numbered:
1. Item 1
2. Item 2

Tasks:
- [x] Done
- [ ] To do

### Links and images
[link text](https://example.com)
![image description](images/picture.png)

### Code
Inline code: `code`

Code block:
```python
print("hello")
```

### Quotes
> Quoted text

### Horizontal rule
---

### Tables
| Column 1 | Column 2 |
|----------|----------|
| A        | B        |
"""
