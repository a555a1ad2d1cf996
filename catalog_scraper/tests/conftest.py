import pytest


PRODUCT_PAGE = """
<html>
<head><title>Samsung Galaxy S21 Ultra</title></head>
<body>
  <h1 class="yhB1nd"><span class="VU-ZEz">Samsung Galaxy S21 Ultra (Phantom Black, 128 GB)</span></h1>
  <div class="yRaY8j A6+E6v">&#8377;24,999</div>
  <div class="_5OesEi HDvrBb">
    <div class="XQDdHH">4.3<img src="https://static.example.com/star.svg"/></div>
    <span class="Wphh3N"><span>1,23,456 Ratings&nbsp;&amp;</span><span>12,345 Reviews</span></span>
  </div>
  <div class="+P14Qy">
    <ul>
      <li><img class="_0DkuPH" src="https://rukminim2.flixcart.com/image/128/128/xif0q/mobile/a.jpeg?q=70"/></li>
      <li><img class="_0DkuPH" src="https://rukminim2.flixcart.com/image/128/128/xif0q/mobile/b.jpeg?q=70"/></li>
      <li><img class="_0DkuPH" src="https://rukminim2.flixcart.com/image/128/128/xif0q/mobile/a.jpeg?q=90"/></li>
      <li><img class="_0DkuPH" src="https://static-assets-web.flixcart.com/placeholder_fcebae.svg"/></li>
    </ul>
  </div>
</body>
</html>
"""


@pytest.fixture
def product_page():
    return PRODUCT_PAGE
