from bs4.element import NavigableString, Tag

from html_skeleton.adapters import serialize
from html_skeleton.cleaner import strip_and_clean


def _all_tags(soup):
    return soup.find_all(True)


def test_drops_script_and_style_at_any_depth(soup_of):
    soup = soup_of(
        '<div><section><script>a()</script><p>x<style>p{}</style></p></section></div>'
        '<script src="b.js"></script>'
    )
    strip_and_clean(soup.contents)

    names = [t.name for t in _all_tags(soup)]
    assert 'script' not in names
    assert 'style' not in names
    assert serialize(soup) == '<div><section><p>x</p></section></div>'


def test_clears_every_attribute(soup_of):
    soup = soup_of('<div class="a" id="b"><a href="/x" data-k="v">l</a><input disabled></div>')
    strip_and_clean(soup.contents)

    assert all(tag.attrs == {} for tag in _all_tags(soup))
    assert serialize(soup) == '<div><a>l</a><input></div>'


def test_returns_survivors_in_order(soup_of):
    soup = soup_of('<b>1</b><script></script>two<!--c--><i>3</i>')
    survivors = strip_and_clean(soup.contents)

    assert [getattr(n, 'name', None) or str(n) for n in survivors] == ['b', 'two', 'c', 'i']
    assert survivors == list(soup.contents)


def test_text_and_comments_untouched(soup_of):
    soup = soup_of('<p>  spaced   text </p><!-- keep me -->')
    strip_and_clean(soup.contents)

    assert soup.p.string == '  spaced   text '
    assert serialize(soup) == '<p>  spaced   text </p><!-- keep me -->'


def test_empty_sequence():
    assert strip_and_clean([]) == []


def test_is_idempotent(soup_of):
    soup = soup_of('<ul class="nav"><li onclick="go()">a<style>x</style></li><li>b</li></ul>')
    first = strip_and_clean(soup.contents)
    once = serialize(soup)
    second = strip_and_clean(soup.contents)

    assert second == first
    assert serialize(soup) == once


def test_text_node_on_its_own_survives():
    text = NavigableString('hello')

    assert strip_and_clean([text]) == [text]


def test_detached_script_is_dropped(soup_of):
    script = soup_of('<script>x</script>').script.extract()

    assert isinstance(script, Tag)
    assert strip_and_clean([script]) == []
