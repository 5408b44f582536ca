"""
processors package

Processing pipeline that converts a Claude export JSON file into Markdown
documents plus extracted artifact files.

Stages:
- load.py          read + parse the export file
- conversation.py  raw record -> model.Conversation
- content.py       message content -> text + artifacts
- write.py         rendered document + artifacts -> disk
- convert.py       runs the stages for every conversation

To run:

python convert.py [INPUT_JSON] [OUTPUT_DIR]

For example:

python convert.py examples/conversations_sample.json output/

Sample result in CLI:

Processing 2 conversations...
✓ Created: Test_Chat_abcd1234.md
✓ Created: Python_helper_5f2e9c1b.md
  ✓ Saved artifact: script.py.py

========================================================================
Completed! 2/2 conversations converted.
========================================================================
Input:  examples/conversations_sample.json
Files saved to: /home/me/output
"""
