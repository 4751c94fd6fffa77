"""Thread safe: link 1000 comments in parallel, each thread with its own default rel."""

from concurrent.futures import ThreadPoolExecutor

from autolink import LinkOptions, auto_link, link_options_context

comments = [f"Comment {i}: see http://example.com/posts/{i}." for i in range(1000)]


def link_batch(batch: list[str]) -> list[str]:
    with link_options_context(LinkOptions(rel="nofollow ugc")):
        return [auto_link(comment) for comment in batch]


batches = [comments[i::8] for i in range(8)]
with ThreadPoolExecutor(max_workers=8) as ex:
    results = [html for batch in ex.map(link_batch, batches) for html in batch]

print(f"Linked {len(results)} comments in parallel")
print("First:", results[0])
