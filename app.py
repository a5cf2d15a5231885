import streamlit as st

from debug_logging.redaction_policy import RedactionPolicy
from debug_logging.sanitizer import make_description
from parsed_json.errors import ParsedJSONError
from parsed_json.inspector import parse
from parsed_json.summary import key_table

# Page config
st.set_page_config(
    page_title="Debug Payload Inspector",
    page_icon="🧾",
    layout="wide"
)

# Title
st.title("🧾 Debug Payload Inspector")
st.markdown("Paste a JSON payload to see how it will look in debug logs.")

payload_text = st.text_area(
    "JSON payload",
    height=240,
    placeholder='{"user": {"name": "Alice", "token": "secret-123"}}'
)

fragments_text = st.text_input(
    "Redact values containing (comma separated)",
    placeholder="secret, token"
)

inspect_button = st.button("🔍 Inspect")


def policy_from_text(text: str) -> RedactionPolicy:
    """Comma separated fragments; blanks are ignored."""
    return RedactionPolicy.of(part.strip() for part in text.split(",") if part.strip())


# Nothing is kept between runs: the payload only lives in the widget.
if inspect_button:

    if not payload_text.strip():
        st.warning("⚠️ Please paste a JSON payload first.")
    else:
        try:
            doc = parse(payload_text)
        except ParsedJSONError as exc:
            st.error(f"❌ {exc}")
        else:
            col1, col2 = st.columns([2, 1])

            with col1:
                st.subheader("📋 Top-level keys")
                table = key_table(doc)
                if table.empty:
                    st.info("The payload root is not a JSON object.")
                else:
                    st.dataframe(table, use_container_width=True)

            with col2:
                st.subheader("📊 Shape")
                st.metric(label="Top-level keys", value=doc.top_level_key_count)
                st.metric(label="Leaf values", value=doc.count_leaf_values)

            st.markdown("---")
            st.subheader("🛡 Sanitized description")
            if isinstance(doc.root, dict):
                st.code(make_description(doc.root, policy_from_text(fragments_text)), language="json")
            else:
                st.code(doc.debug_description)

else:
    st.info("Paste a payload and click 'Inspect' to begin.")
