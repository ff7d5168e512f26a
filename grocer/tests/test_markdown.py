from grocer.logic.markdown import render_instructions


def test_empty_text():
    assert render_instructions("") == ""


def test_bold_italic_and_paragraphs():
    html = render_instructions("**Preheat** the oven\nStir *gently*")
    assert html == "<p><strong>Preheat</strong> the oven</p><p>Stir <em>gently</em></p>"


def test_bullets_are_grouped_in_one_list():
    html = render_instructions("Steps:\n- chop\n* fry *hot*\n\nServe")
    assert html == ("<p>Steps:</p><ul><li>chop</li><li>fry <em>hot</em></li></ul>"
                    "<br/><p>Serve</p>")


def test_html_is_escaped():
    assert render_instructions("<script>x</script>") == "<p>&lt;script&gt;x&lt;/script&gt;</p>"
