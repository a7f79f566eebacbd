from HtmlBlocks.normalizer import compress_html


def test_collapses_source_newlines():
    html = "<p>\n  Hello\n</p>\n<p>World</p>\n"
    assert compress_html(html) == "<p>Hello</p><p>World</p>"


def test_pre_strips_leading_newline_and_tag_indent():
    html = "<div>\n  <pre>\n  line1\n    line2\n  </pre>\n</div>"
    assert compress_html(html) == "<pre>line1\n  line2\n</pre>"


def test_multiple_pre_blocks_keep_their_own_indent():
    html = "<pre>a</pre>\n    <pre>\n    x\n      y</pre>"
    assert compress_html(html) == "<pre>a</pre><pre>x\n  y</pre>"


def test_attributes_survive_whitespace_collapse():
    html = '<p class="intro"\n   id="x">Hi</p>\n<a href="https://x.test/a b">\n  link\n</a>'
    assert compress_html(html) == '<p class="intro"\n   id="x">Hi</p><a href="https://x.test/a b">link</a>'


def test_br_becomes_newline_and_wrappers_are_unwrapped():
    html = '<div><span class="x">a</span><br/>b<br></div>'
    assert compress_html(html) == "a\nb\n"


def test_space_inserted_before_inline_tags_in_paragraph():
    html = "<p>Hello<b>world</b> and<i>more</i>, see<code>x</code></p>"
    assert compress_html(html) == "<p>Hello <b>world</b> and <i>more</i>, see <code>x</code></p>"


def test_space_not_inserted_outside_paragraphs_or_for_other_tags():
    assert compress_html("<li>a<b>b</b></li>") == "<li>a<b>b</b></li>"
    assert compress_html("<p>a<strong>b</strong></p>") == "<p>a<strong>b</strong></p>"


def test_compress_is_stable_on_its_own_output():
    html = "<h1>Title</h1>\n<p>Some <b>bold</b> text</p>\n  <pre>\n  code\n    more\n  </pre>"
    once = compress_html(html)
    assert once == "<h1>Title</h1><p>Some <b>bold</b> text</p><pre>code\n  more\n</pre>"
    assert compress_html(once) == once
