"""Unit tests for the exclusion/validation rules and the markup scanner."""

import pytest

from email_hunter import (
    DEFAULT_RULES,
    EMAIL_RE,
    ExtractionRules,
    extract_from_html,
    is_valid_email,
    should_exclude,
)

SEED = "https://a.com/"


class TestIsValidEmail:

    @pytest.mark.parametrize("email", [
        "a@b.co",
        "bob@site.com",
        "x@y.z",
        "first.last+tag@sub.domain.org",
    ])
    def test_accepts_plausible_addresses(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", [
        "info@example.com",
        "john@EXAMPLE.org",
        "info@email.com",
        "yourname@Email.co",
        "myemail@corp.io",
        "a@b",
        "icon@2x.png",
        "hero@3x.jpg",
        "photo@1x.webp",
        "spinner@2x.gif",
    ])
    def test_rejects_placeholders_short_tokens_and_images(self, email):
        assert not is_valid_email(email)

    def test_image_marker_check_is_case_sensitive(self):
        assert is_valid_email("logo@2x.PNG")

    def test_rules_are_replaceable(self):
        relaxed = ExtractionRules(rejected_substrings=("example",))
        assert relaxed.is_valid_email("support@emailcorp.com")
        assert not DEFAULT_RULES.is_valid_email("support@emailcorp.com")
        assert not relaxed.is_valid_email("support@example.com")


class TestShouldExclude:

    @pytest.mark.parametrize("link", [
        "/logo.PNG",
        "/static/app.js",
        "/docs/README.md",
        "https://a.com/feed.rss",
        "/fonts/x.woff2",
        "/poetry.lock",
    ])
    def test_excluded_assets(self, link):
        assert should_exclude(link)

    @pytest.mark.parametrize("link", ["/contact", "/about-us", "mailto:bob@site.com", "#top"])
    def test_pages_are_kept(self, link):
        assert not should_exclude(link)


def test_email_pattern_requires_two_letter_tld():
    assert EMAIL_RE.findall("x@y.z a@b.co") == ["a@b.co"]


class TestExtractFromHtml:

    def test_both_quote_styles_are_scanned(self):
        html = """<a href="/one">1</a><a href='/two'>2</a>"""
        _, links = extract_from_html(html, SEED, SEED)
        assert links == {"https://a.com/one", "https://a.com/two"}

    def test_mailto_yields_email_but_no_link(self):
        html = '<a href="MAILTO:Bob@Site.com?subject=Hi">Bob</a>'
        emails, links = extract_from_html(html, SEED, SEED)
        assert emails == {"Bob@Site.com"}
        assert links == set()

    def test_address_embedded_in_href(self):
        html = "<a href='/contact/jane@site.org'>Jane</a>"
        emails, links = extract_from_html(html, SEED, SEED)
        assert "jane@site.org" in emails
        assert links == {"https://a.com/contact/jane@site.org"}

    def test_body_text_is_scanned(self):
        html = "<p>Write to sales@site.com or info@example.com</p>"
        emails, _ = extract_from_html(html, SEED, SEED)
        assert emails == {"sales@site.com"}

    def test_image_names_are_not_emails(self):
        html = '<img src="/img/logo@2x.png"><p>team@site.com</p>'
        emails, _ = extract_from_html(html, SEED, SEED)
        assert emails == {"team@site.com"}

    def test_origin_filtering(self):
        html = """
            <a href="https://b.com/x">other</a>
            <a href="/contact">contact</a>
            <a href="//a.com/team">team</a>
            <a href="//cdn.a.com/page">cdn</a>
            <a href="https://a.com:8443/admin">port</a>
            <a href="javascript:void(0)">js</a>
            <a href="tel:+15551234">call</a>
        """
        _, links = extract_from_html(html, SEED, SEED)
        assert links == {"https://a.com/contact", "https://a.com/team"}

    def test_origin_is_judged_against_seed_not_page(self):
        html = '<a href="/deeper">d</a><a href="https://a.com/back">b</a>'
        _, links = extract_from_html(html, "https://a.com/blog/post", SEED)
        assert links == {"https://a.com/deeper", "https://a.com/back"}

        _, links = extract_from_html(html, "https://b.com/page", SEED)
        assert links == {"https://a.com/back"}

    def test_relative_links_resolve_against_page_url(self):
        html = '<a href="team">t</a>'
        _, links = extract_from_html(html, "https://a.com/about/", SEED)
        assert links == {"https://a.com/about/team"}

    def test_excluded_links_are_not_crawled(self):
        html = '<a href="/logo.PNG">x</a><a href="/report.pdf">y</a><a href="/ok">z</a>'
        _, links = extract_from_html(html, SEED, SEED)
        assert links == {"https://a.com/ok"}

    def test_excluded_mailto_is_skipped_before_mailto_handling(self):
        # ".md" appears in the domain part, so the whole href is skipped
        html = '<a href="mailto:ops@site.md.io">ops</a>'
        emails, _ = extract_from_html(html, SEED, SEED)
        # the address still shows up through the body scan
        assert emails == {"ops@site.md.io"}

    def test_markup_unaware_scan_includes_comments_and_scripts(self):
        html = """
            <!-- <a href="/hidden">old</a> -->
            <script>var tpl = "<a href='/from-script'>x</a>";</script>
        """
        _, links = extract_from_html(html, SEED, SEED)
        assert links == {"https://a.com/hidden", "https://a.com/from-script"}

    def test_malformed_link_is_dropped_alone(self):
        html = '<a href="http://[::1">bad</a><a href="/good">good</a> hi@site.com'
        emails, links = extract_from_html(html, SEED, SEED)
        assert links == {"https://a.com/good"}
        assert emails == {"hi@site.com"}

    def test_fragments_are_kept(self):
        html = '<a href="/about#team">t</a>'
        _, links = extract_from_html(html, SEED, SEED)
        assert links == {"https://a.com/about#team"}

    def test_results_are_deduplicated(self):
        html = '<a href="/x">1</a><a href="/x">2</a><p>z@site.com z@site.com</p>'
        emails, links = extract_from_html(html, SEED, SEED)
        assert emails == {"z@site.com"}
        assert links == {"https://a.com/x"}

    def test_extraction_is_idempotent(self):
        html = """
            <a href="mailto:bob@site.com">Bob</a>
            <a href='/about'>About</a>
            <a href="https://b.com/">elsewhere</a>
            carol@site.com
        """
        first = extract_from_html(html, SEED, SEED)
        second = extract_from_html(html, SEED, SEED)
        assert first == second
        assert first == ({"bob@site.com", "carol@site.com"}, {"https://a.com/about"})

    def test_custom_rules_are_honoured(self):
        rules = ExtractionRules(exclude_patterns=(".php",))
        html = '<a href="/index.php">i</a><a href="/style.css">s</a>'
        _, links = extract_from_html(html, SEED, SEED, rules)
        assert links == {"https://a.com/style.css"}
