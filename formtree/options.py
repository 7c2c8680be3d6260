"""Options shared by the inputs of a form."""

from pydantic import BaseModel, ConfigDict


class Options(BaseModel):
    """Bag of information about options available to form inputs.

    Fieldsets only hold and hand out the reference; applications subclass
    this model or pass arbitrary keyword attributes::

        options = Options(countries={"FR": "France", "DE": "Germany"})
        options.countries
    """

    model_config = ConfigDict(extra="allow")
