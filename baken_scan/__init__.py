"""JRA馬券QRコード読み取りコア."""
