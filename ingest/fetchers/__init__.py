from .acgnx_fetcher import AcgnxFetcher, extract_item, get_tag_content, split_items

__all__ = ["AcgnxFetcher", "extract_item", "get_tag_content", "split_items"]
