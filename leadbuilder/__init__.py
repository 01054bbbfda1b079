# Lead Builder - lead qualification scoring and first-touch outreach drafts.
#
# Key modules:
#   agents/email_guesser.py  - first.last@company.com guesses
#   agents/scorer.py         - compute_insight(): score, rationale, missing fields
#   agents/message_writer.py - personalized message template
#   workspace.py             - headless form state with overrides and copy acks
#   api/app.py               - FastAPI surface
