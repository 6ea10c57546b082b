"""
Sample documents for every transform.

Small but realistic inputs in the shape each transform expects. Used by
the demo script and the tests.
"""
from typing import Dict


HIERARCHY_SOURCE = """\
<Root>
  <Data>
    <Category>A</Category>
    <Quantity>3</Quantity>
    <Price>24.50</Price>
  </Data>
  <Data>
    <Category>B</Category>
    <Quantity>1</Quantity>
    <Price>89.99</Price>
  </Data>
  <Data>
    <Category>A</Category>
    <Quantity>5</Quantity>
    <Price>4.95</Price>
  </Data>
  <Data>
    <Category>C</Category>
    <Quantity>2</Quantity>
    <Price>66.00</Price>
  </Data>
  <Data>
    <Category>B</Category>
    <Quantity>10</Quantity>
    <Price>.99</Price>
  </Data>
</Root>
"""

PURCHASE_ORDERS_SOURCE = """\
<?xml version="1.0"?>
<aw:PurchaseOrders xmlns:aw="http://www.adventure-works.com">
  <aw:PurchaseOrder aw:PurchaseOrderNumber="99301" aw:OrderDate="1999-10-20">
    <aw:Address aw:Type="Shipping">
      <aw:Name>Ellen Adams</aw:Name>
      <aw:Street>123 Maple Street</aw:Street>
      <aw:City>Mill Valley</aw:City>
      <aw:State>NY</aw:State>
      <aw:Zip>10999</aw:Zip>
      <aw:Country>USA</aw:Country>
    </aw:Address>
    <aw:Address aw:Type="Billing">
      <aw:Name>Tai Yee</aw:Name>
      <aw:Street>8 Oak Avenue</aw:Street>
      <aw:City>Old Town</aw:City>
      <aw:State>PA</aw:State>
      <aw:Zip>95819</aw:Zip>
      <aw:Country>USA</aw:Country>
    </aw:Address>
  </aw:PurchaseOrder>
  <aw:PurchaseOrder aw:PurchaseOrderNumber="99505" aw:OrderDate="1999-10-22">
    <aw:Address aw:Type="Shipping">
      <aw:Name>Cristian Osorio</aw:Name>
      <aw:Street>456 Main Street</aw:Street>
      <aw:City>Buffalo</aw:City>
      <aw:State>PA</aw:State>
      <aw:Zip>98112</aw:Zip>
      <aw:Country>USA</aw:Country>
    </aw:Address>
    <aw:Address aw:Type="Billing">
      <aw:Name>Cristian Osorio</aw:Name>
      <aw:Street>456 Main Street</aw:Street>
      <aw:City>Buffalo</aw:City>
      <aw:State>NY</aw:State>
      <aw:Zip>98112</aw:Zip>
      <aw:Country>USA</aw:Country>
    </aw:Address>
  </aw:PurchaseOrder>
  <aw:PurchaseOrder aw:PurchaseOrderNumber="99189" aw:OrderDate="1999-10-22">
    <aw:Address aw:Type="Shipping">
      <aw:Name>Jessica Arnold</aw:Name>
      <aw:Street>4055 Madison Ave</aw:Street>
      <aw:City>Seattle</aw:City>
      <aw:State>NY</aw:State>
      <aw:Zip>98112</aw:Zip>
      <aw:Country>USA</aw:Country>
    </aw:Address>
  </aw:PurchaseOrder>
  <aw:PurchaseOrder aw:PurchaseOrderNumber="99110" aw:OrderDate="1999-10-25">
    <aw:Address aw:Type="Billing">
      <aw:Name>Jessica Arnold</aw:Name>
      <aw:Street>4055 Madison Ave</aw:Street>
      <aw:City>Buffalo</aw:City>
      <aw:State>PA</aw:State>
      <aw:Zip>98112</aw:Zip>
      <aw:Country>USA</aw:Country>
    </aw:Address>
    <aw:Address aw:Type="Shipping">
      <aw:Name>Jessica Arnold</aw:Name>
      <aw:Street>4055 Madison Ave</aw:Street>
      <aw:City>Buffalo</aw:City>
      <aw:State>NY</aw:State>
      <aw:Zip>98112</aw:Zip>
      <aw:Country>USA</aw:Country>
    </aw:Address>
  </aw:PurchaseOrder>
</aw:PurchaseOrders>
"""

CUSTOMERS_CSV_SOURCE = (
    "GREAL,Great Lakes Food Market,Howard Snyder,Marketing Manager,(503) 555-7555,"
    "2732 Baker Blvd.,Eugene,OR,97403,USA\r\n"
    "HUNGC,Hungry Coyote Import Store,Yoshi Latimer,Sales Representative,(503) 555-6874,"
    "City Center Plaza 516 Main St.,Elgin,OR,97827,USA\r\n"
    "\r\n"
    "LAZYK,Lazy K Kountry Store,John Steel,Marketing Manager,(509) 555-7969,"
    "12 Orchestra Terrace,Walla Walla,WA,99362,USA\r\n"
)

CONCATENATION_SOURCE = """\
<Document>
  <Sentence>
    <Word>Hello</Word>
    <Punctuation>,</Punctuation>
    <Word>World</Word>
    <Punctuation>!</Punctuation>
  </Sentence>
  <Sentence>
    <Word>Bye</Word>
    <Punctuation>.</Punctuation>
  </Sentence>
</Document>
"""

CUSTOMERS_SOURCE = """\
<Root>
  <customer id="1">
    <name>Anna</name>
    <address>
      <city>Oslo</city>
    </address>
  </customer>
  <customer id="2">
    <name>Bjorn</name>
    <address>
      <city>Bergen</city>
    </address>
  </customer>
</Root>
"""

CHANNELS_SOURCE = """\
<service>
  <channel id="1">
    <subscriber name="a"/>
    <subscriber name="b"/>
    <!--DELETE-->
  </channel>
  <channel id="2">
    <subscriber name="c"/>
    <subscriber name="d"/>
  </channel>
  <channel id="3">
    <subscriber name="e"/>
    <!--DELETE-->
  </channel>
  <channel id="4">
    <!--DELETE-->
    <subscriber name="f"/>
    <subscriber name="g"/>
    <subscriber name="h"/>
  </channel>
  <channel id="5">
    <subscriber name="i"/>
    <subscriber name="j"/>
    <!-- DELETE -->
  </channel>
</service>
"""

GENERAL_CUSTOMERS_SOURCE = """\
<Root>
  <Customers>
    <CustomerID>LETSS</CustomerID>
    <FullAddress><City>San Francisco</City><Country>USA</Country></FullAddress>
  </Customers>
  <Customers>
    <CustomerID>GREAL</CustomerID>
    <FullAddress><City>Eugene</City><Country>USA</Country></FullAddress>
  </Customers>
  <Customers>
    <CustomerID>ALFKI</CustomerID>
    <FullAddress><City>Berlin</City><Country>Germany</Country></FullAddress>
  </Customers>
  <Customers>
    <CustomerID>HUNGC</CustomerID>
    <FullAddress><City>Elgin</City><Country>USA</Country></FullAddress>
  </Customers>
</Root>
"""

ORDERS_SOURCE = """\
<Root>
  <Orders>
    <Order><product>1</product></Order>
    <Order><product>2</product></Order>
    <Order><product>1</product></Order>
    <Order><product>9</product></Order>
  </Orders>
  <products>
    <product Id="1" Value="100"/>
    <product Id="2" Value="250"/>
    <product Id="3" Value="75"/>
  </products>
</Root>
"""


def sample_documents() -> Dict[str, str]:
    """Sample input keyed by the name of the transform that reads it."""
    return {
        "create_hierarchy": HIERARCHY_SOURCE,
        "get_purchase_orders": PURCHASE_ORDERS_SOURCE,
        "read_customers_from_csv": CUSTOMERS_CSV_SOURCE,
        "get_concatenation_string": CONCATENATION_SOURCE,
        "replace_customers_with_contacts": CUSTOMERS_SOURCE,
        "find_channels_ids": CHANNELS_SOURCE,
        "sort_customers": GENERAL_CUSTOMERS_SOURCE,
        "get_orders_value": ORDERS_SOURCE,
    }
