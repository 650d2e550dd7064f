from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class Brewery(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    brewery_id: Optional[int] = None
    brewery_name: str = ""


class Beer(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    bid: int
    beer_name: str
    beer_label: Optional[str] = None
    beer_style: str = ""
    beer_abv: Optional[float] = None
    beer_ibu: Optional[int] = None
    beer_description: str = ""


def _title(beer: Beer, brewery: Optional[Brewery]) -> str:
    if brewery and brewery.brewery_name:
        return f"{beer.beer_name} by {brewery.brewery_name}"
    return beer.beer_name


class SearchItem(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    beer: Beer
    brewery: Optional[Brewery] = None
    
    def title(self) -> str:
        return _title(self.beer, self.brewery)
    
    @property
    def id(self) -> str:
        return str(self.beer.bid)


class SearchResponse(BaseModel):
    """Beers matching a search query, in the order the API ranked them."""
    
    items: List[SearchItem] = []


class BeerInfo(Beer):
    """Extended record returned by the beer info endpoint."""
    
    rating_score: Optional[float] = None
    brewery: Optional[Brewery] = None
    
    def title(self) -> str:
        return _title(self, self.brewery)
    
    def text(self) -> str:
        facts = [self.beer_style] if self.beer_style else []
        if self.beer_abv is not None:
            facts.append(f"{self.beer_abv:g}% ABV")
        if self.beer_ibu is not None:
            facts.append(f"{self.beer_ibu} IBU")
        if self.rating_score is not None:
            facts.append(f"Rating {self.rating_score:.2f}")
        
        lines = [" | ".join(facts)] if facts else []
        if self.beer_description:
            lines.append(self.beer_description.strip())
        return "\n".join(lines)
