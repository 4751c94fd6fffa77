"""Link URLs in a sentence, zero config, zero deps."""

from autolink import auto_link

print(auto_link("Read the docs at https://example.com/docs, or ping ftp://ftp.example.com!"))
