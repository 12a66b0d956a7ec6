# Small nations dump in the shape NationStates publishes (fields trimmed)
SAMPLE_DUMP = """<?xml version="1.0" encoding="UTF-8"?>
<NATIONS api_version="12">
<NATION>
<NAME>Alpha</NAME>
<TYPE>Republic</TYPE>
<UNSTATUS>WA Delegate</UNSTATUS>
<ENDORSEMENTS>beta,gamma</ENDORSEMENTS>
<REGION>The South Pacific</REGION>
<FREEDOM><CIVILRIGHTS>Good</CIVILRIGHTS><ECONOMY>Strong</ECONOMY></FREEDOM>
</NATION>
<NATION>
<NAME>Outsider Land</NAME>
<UNSTATUS>WA Member</UNSTATUS>
<ENDORSEMENTS>alpha</ENDORSEMENTS>
<REGION>Lazarus</REGION>
</NATION>
<NATION>
<NAME>Beta</NAME>
<UNSTATUS>WA Member</UNSTATUS>
<ENDORSEMENTS></ENDORSEMENTS>
<REGION>the South Pacific</REGION>
</NATION>
<NATION>
<NAME>Gamma</NAME>
<UNSTATUS>WA Member</UNSTATUS>
<ENDORSEMENTS>alpha</ENDORSEMENTS>
<REGION>THE SOUTH PACIFIC</REGION>
</NATION>
<NATION>
<NAME>Delta</NAME>
<UNSTATUS>Non-member</UNSTATUS>
<ENDORSEMENTS></ENDORSEMENTS>
<REGION>The South Pacific</REGION>
</NATION>
<NATION>
<UNSTATUS>WA Member</UNSTATUS>
<REGION>The South Pacific</REGION>
</NATION>
</NATIONS>
"""
